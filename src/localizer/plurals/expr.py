"""Simplification of CLDR plural rule conditions."""

import re

# Sentinel for the default branch of a plural rule chain
ELSE = "else"

# Quantities are always integers, so the fraction operands v and t are 0
_INTEGER_ONLY_CLAUSES = [
    clause
    for operand in ("v", "t")
    for clause in (
        ("suffix", f" and {operand} = 0"),
        ("prefix", f"{operand} = 0 and "),
        ("suffix", f" or {operand} != 0"),
        ("prefix", f"{operand} != 0 or "),
    )
]

# Conditions that always hold once the clauses above are gone
_ALWAYS_TRUE = {"v = 0", "t = 0"}

_AND = re.compile(r"\band\b")
_OR = re.compile(r"\bor\b")


def transform_expr(condition: str) -> str:
    """Turn a CLDR rule such as ``i = 1 and v = 0 @integer 1`` into ``i = 1``.

    Sample lists after ``@`` are discarded, integer-only clauses on ``v`` and
    ``t`` are stripped and ``and``/``or`` become ``&&``/``||``. Other
    operators and operands are left as they are. An empty condition is the
    catch-all branch and yields ``"else"``.
    """
    t = condition.split("@", 1)[0].strip()

    for position, clause in _INTEGER_ONLY_CLAUSES:
        if position == "suffix":
            t = t.removesuffix(clause)
        else:
            t = t.removeprefix(clause)

    if t in _ALWAYS_TRUE:
        t = ""

    if not t:
        return ELSE

    t = _AND.sub("&&", t)
    t = _OR.sub("||", t)
    return t
