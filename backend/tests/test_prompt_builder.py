from email_writer.models.email_models import EmailRequest
from email_writer.services.email_service import build_prompt

INSTRUCTION = (
    "Please generate a professional email reply for the following email content. "
    "Please don't include the subject line. "
)


def test_prompt_without_tone():
    prompt = build_prompt(EmailRequest(emailContent="Please confirm."))
    assert prompt == INSTRUCTION + "\nOriginal Email\nPlease confirm."
    assert "tone" not in prompt


def test_blank_tone_adds_no_clause():
    for tone in ["", "   ", "\t\n"]:
        prompt = build_prompt(EmailRequest(emailContent="Hi", tone=tone))
        assert "Use a" not in prompt
        assert prompt.endswith("\nOriginal Email\nHi")


def test_tone_is_used_verbatim():
    prompt = build_prompt(EmailRequest(emailContent="Hi", tone="Very Formal!"))
    assert "Use a Very Formal! tone" in prompt


def test_tone_whitespace_is_not_trimmed():
    prompt = build_prompt(EmailRequest(emailContent="Hi", tone=" casual "))
    assert "Use a  casual  tone" in prompt


def test_email_content_forwarded_unaltered():
    content = "Line one\n\n  <b>Line two</b> {braces} %s\n" + "x" * 10_000
    prompt = build_prompt(EmailRequest(emailContent=content, tone="friendly"))
    assert prompt.startswith(INSTRUCTION)
    marker = "\nOriginal Email\n"
    assert prompt[prompt.index(marker) + len(marker):] == content


def test_empty_content_gives_degenerate_prompt():
    prompt = build_prompt(EmailRequest())
    assert prompt == INSTRUCTION + "\nOriginal Email\n"


def test_scenario_friendly_reschedule():
    prompt = build_prompt(EmailRequest(emailContent="Can we reschedule?", tone="friendly"))
    assert "Use a friendly tone" in prompt
    assert prompt.endswith("Can we reschedule?")


def test_request_accepts_attribute_names():
    req = EmailRequest(email_content="Hello", tone="formal")
    assert req.email_content == "Hello"
    assert build_prompt(req).endswith("Hello")


def test_null_content_becomes_empty():
    req = EmailRequest.model_validate({"emailContent": None, "tone": "friendly"})
    assert req.email_content == ""
    assert build_prompt(req).endswith("Use a friendly tone\nOriginal Email\n")


def test_non_breaking_space_tone_is_not_blank():
    prompt = build_prompt(EmailRequest(emailContent="Hi", tone="\u00a0"))
    assert "Use a \u00a0 tone" in prompt


def test_unicode_space_separators_are_blank():
    for tone in ["\u3000", "\u2003\u2009", "\x1c\x1f"]:
        prompt = build_prompt(EmailRequest(emailContent="Hi", tone=tone))
        assert "Use a" not in prompt
