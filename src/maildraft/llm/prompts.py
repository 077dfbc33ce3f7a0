"""Prompt templates for the generation service.

The output-format directives are part of the contract with the model: the
response parser's JSON and ``Subject:`` tiers expect exactly what these
templates ask for.
"""

SYSTEM_PROMPT = """You are a helpful assistant that generates professional emails.
Return output as JSON with keys "subject" and "body" where body may include paragraphs and \
line breaks.
If JSON cannot be returned, provide an email subject on the first line prefixed with \
"Subject:" and body after a blank line."""

USER_PROMPT = """Generate a {tone} email (subject and body) for recipients: {recipients}
User prompt:
{user_prompt}

Output format: JSON like {{"subject":"...", "body":"..."}} if possible. If not possible, \
put "Subject:" on the first line, then the body."""

DEFAULT_PROMPT = (
    "Write a polite, concise follow-up email asking for a decision. Keep it under 200 words."
)

PROMPT_PRESETS: dict[str, str] = {
    "follow-up": "Write a short, friendly follow-up asking for next steps within a week.",
    "intro": "Write a short introduction email to request a meeting and propose 2 time slots.",
}
