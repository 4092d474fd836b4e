from money_math.parsing.amount_parser import ParsedAmount, parse_units, string_to_units

__all__ = ["ParsedAmount", "parse_units", "string_to_units"]
