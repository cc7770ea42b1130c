"""Keyword-driven answers to common tax questions.

Matching is plain substring containment on the lower-cased message. Keywords
are checked in declaration order and the first hit wins, so "tax" shadows
later keywords for messages that mention it.
"""

from __future__ import annotations

TAX_RESPONSES: tuple[tuple[str, str], ...] = (
    (
        "tax",
        "Tax is a mandatory financial charge imposed by the government on "
        "individuals or businesses to fund public services and infrastructure.",
    ),
    (
        "deduction",
        "Common tax deductions in India include Section 80C investments (up to "
        "₹1.5 lakh), Section 80D health insurance premiums, Section 80E education "
        "loan interest, Section 80G charitable donations, and home loan interest "
        "(up to ₹2 lakh under Section 24). Keep all receipts and documents as "
        "proof for these deductions.",
    ),
    (
        "credit",
        "In India, we have tax deductions rather than tax credits. Popular "
        "deductions include Section 80TTA for savings account interest (up to "
        "₹10,000), Section 80CCD for NPS contributions, and Section 80GG for house "
        "rent if HRA is not received from employer.",
    ),
    (
        "deadline",
        "The tax filing deadline in India is usually July 31st for non-audit cases "
        "and October 31st for audit cases. Late filing can lead to penalties "
        "ranging from ₹5,000 to ₹10,000 depending on the delay. Filing before the "
        "deadline is advisable to avoid these penalties.",
    ),
    (
        "refund",
        "After filing your ITR (Income Tax Return), you can expect your refund "
        "within 20-45 days if everything is in order. You can check the refund "
        "status on the Income Tax e-Filing portal using your PAN and "
        "acknowledgment number.",
    ),
    (
        "status",
        "In India, taxpayers are classified as Individuals, HUF (Hindu Undivided "
        "Family), Firms, Companies, and Others. The tax rates and slabs differ "
        "based on your category and whether you opt for the new tax regime or the "
        "old one.",
    ),
    (
        "withholding",
        "TDS (Tax Deducted at Source) is India's withholding tax system where tax "
        "is deducted at the source of income. Your employer deducts TDS from your "
        "salary based on your projected annual income. Form 26AS shows all TDS "
        "deducted in a financial year.",
    ),
    (
        "audit",
        "Tax scrutiny (audit) by the Income Tax Department examines whether "
        "you've declared all income correctly. Cases are selected based on "
        "high-value transactions, discrepancies, or randomly. Maintain proper "
        "documentation of all financial transactions to handle scrutiny "
        "effectively.",
    ),
)

DEFAULT_RESPONSE = (
    "I'm your Indian Tax Assistant and can help answer questions about tax "
    "deductions under various sections, filing deadlines, TDS, and more. Feel "
    "free to ask me any tax-related questions specific to the Indian taxation "
    "system."
)

WELCOME_MESSAGES: tuple[str, ...] = (
    "Hello! I'm your Tax Assistant. How can I help you with your tax questions today?",
    "Here are some topics I can help with:\n"
    "• Tax deductions\n"
    "• Filing status\n"
    "• Tax deadlines\n"
    "• Refund status",
)


def _first_match(message: object) -> tuple[str, str] | None:
    if not isinstance(message, str):
        return None
    lowered = message.lower()
    for pair in TAX_RESPONSES:
        if pair[0] in lowered:
            return pair
    return None


def match_keyword(message: object) -> str | None:
    """Return the first declared keyword contained in the message, if any."""
    pair = _first_match(message)
    return None if pair is None else pair[0]


def respond(message: object) -> str:
    """Answer a free-text question with a canned response.

    Args:
        message: User message. Non-string input gets the default answer.

    Returns:
        Answer for the first matching keyword, or DEFAULT_RESPONSE.

    Example:
        >>> respond("When is the DEADLINE?").startswith("The tax filing deadline")
        True
    """
    pair = _first_match(message)
    return DEFAULT_RESPONSE if pair is None else pair[1]
