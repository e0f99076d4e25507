from qbscript.reader.parser import lex, parse, position_at, read_program, TokenStream

__all__ = ["lex", "parse", "position_at", "read_program", "TokenStream"]
