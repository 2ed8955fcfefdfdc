from tokenguard.parser.declarations import apply_declarations, parse_declarations
from tokenguard.parser.errors import ParseError
from tokenguard.parser.value import parse_value

__all__ = ["ParseError", "parse_value", "parse_declarations", "apply_declarations"]
