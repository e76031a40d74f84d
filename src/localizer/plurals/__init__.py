"""CLDR plural rule handling."""

from .expr import ELSE, transform_expr
from .rules import PluralRulesParser

__all__ = ["ELSE", "PluralRulesParser", "transform_expr"]
