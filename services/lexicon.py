import math
import re
from typing import Dict, Optional, Union

Weight = Union[int, float]

DEFAULT_WEIGHT = 1

LINE_SPLIT_REGEX = re.compile(r"\r?\n")
# Plain decimal literals only: "10", "2.5", "-3", ".5", "1e2"
NUMBER_REGEX = re.compile(r"^[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?$")


def parse_weight(raw: Optional[str]) -> Weight:
    """
    Turn the weight column of a wordlist line into a number.
    Anything missing, non-numeric, non-finite or zero falls back to 1.
    """
    if raw is None:
        return DEFAULT_WEIGHT
    raw = raw.strip()
    if not NUMBER_REGEX.match(raw):
        return DEFAULT_WEIGHT

    value = float(raw)
    if not math.isfinite(value) or value == 0:
        return DEFAULT_WEIGHT
    if value.is_integer():
        return int(value)
    return value


def parse_lexicon(text: str) -> Dict[str, Weight]:
    """
    Parse a wordlist document ("term,weight" per line) into term -> weight.

    Blank lines and lines with an empty term are skipped, columns after the
    weight are ignored and a repeated term keeps the last weight seen.
    """
    lexicon: Dict[str, Weight] = {}

    for line in LINE_SPLIT_REGEX.split(text or ""):
        line = line.strip()
        if not line:
            continue

        fields = line.split(",")
        term = fields[0].strip().lower()
        if not term:
            continue

        weight_text = fields[1] if len(fields) > 1 else None
        lexicon[term] = parse_weight(weight_text)

    return lexicon
