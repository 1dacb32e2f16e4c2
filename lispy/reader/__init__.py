from lispy.reader.grammar import ParseNode, parse
from lispy.reader.reader import read, read_number, read_source

__all__ = ["ParseNode", "parse", "read", "read_number", "read_source"]
