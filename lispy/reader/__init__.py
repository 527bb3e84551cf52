from lispy.reader.ast import AstNode
from lispy.reader.parser import Parser, lex
from lispy.reader.reader import Reader, read_node
