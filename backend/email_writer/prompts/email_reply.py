"""
Email Reply Prompt

Asks for a professional reply to a single email, optionally in a given tone.
No generation parameters are set; model defaults apply.
"""

INSTRUCTION = (
    "Please generate a professional email reply for the following email content. "
    "Please don't include the subject line. "
)

TONE_TEMPLATE = "Use a {tone} tone"

ORIGINAL_EMAIL_HEADER = "\nOriginal Email\n"
