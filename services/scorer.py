import re
from typing import Dict, List, Union

from services.lexicon import Weight, parse_lexicon

RISK_HIGH = "HIGH"
RISK_MEDIUM = "MEDIUM"
RISK_LOW = "LOW"

HIGH_THRESHOLD = 50
MEDIUM_THRESHOLD = 20

# Applied after lower-casing, so only the lower-case accented set is listed
NON_WORD_REGEX = re.compile(r"[^a-z0-9áéíóúñü\s]")


def normalize_text(text: str) -> List[str]:
    """Lower-case, strip punctuation and split an email body into tokens."""
    if not text:
        return []
    cleaned = NON_WORD_REGEX.sub(" ", text.lower())
    return cleaned.split()


def count_terms(lexicon: Dict[str, Weight], tokens: List[str]) -> Dict[str, int]:
    # dict keeps first-occurrence order, which the ranking relies on
    frequencies: Dict[str, int] = {}
    for token in tokens:
        if token in lexicon:
            frequencies[token] = frequencies.get(token, 0) + 1
    return frequencies


def score_rows(lexicon: Dict[str, Weight], frequencies: Dict[str, int]) -> List[dict]:
    """
    Build one row per matched term and rank them by total, then frequency.
    Rows that tie on both keep the order in which the term first appeared.
    """
    rows = []
    for term, frequency in frequencies.items():
        weight = lexicon[term]
        rows.append(
            {
                "term": term,
                "frequency": frequency,
                "weight": weight,
                "total": frequency * weight,
            }
        )
    return sorted(rows, key=lambda r: (-r["total"], -r["frequency"]))


def classify_risk(grand_total: Union[int, float]) -> str:
    if grand_total >= HIGH_THRESHOLD:
        return RISK_HIGH
    if grand_total >= MEDIUM_THRESHOLD:
        return RISK_MEDIUM
    return RISK_LOW


def score_email(lexicon: Dict[str, Weight], email_text: str) -> dict:
    tokens = normalize_text(email_text)
    rows = score_rows(lexicon, count_terms(lexicon, tokens))
    grand_total = sum(r["total"] for r in rows)
    return {
        "rows": rows,
        "grand_total": grand_total,
        "risk_tier": classify_risk(grand_total),
    }


def analyze(lexicon_text: str, email_text: str) -> dict:
    """
    Score an email against a wordlist document.

    Returns {"rows": [...], "grand_total": number, "risk_tier": "LOW" | "MEDIUM" | "HIGH"}.
    Pure function: identical inputs always give identical output.
    """
    return score_email(parse_lexicon(lexicon_text), email_text)
