###############################################################################
#  AST visualizer - generates a DOT file for Graphviz.                        #
#                                                                             #
#  To generate an image from the DOT file run $ dot -Tpng -o ast.png ast.dot  #
#                                                                             #
###############################################################################
import textwrap
from typing import List, Dict

from arith.lexer import single_chr_toks
from arith.ast import AST, BinaryOp, Literal


operator_labels = {tok.type: symbol for symbol, tok in single_chr_toks.items()}


class ASTVisualizer:
    def __init__(self, root_node: AST):
        self.root_node = root_node
        self.ncount = 1
        self.dot_header = [
            textwrap.dedent(
                """\
        digraph astgraph {
          node [shape=circle, fontsize=12, fontname="Courier", height=.1];
          ranksep=.3;
          edge [arrowsize=.5]

        """
            )
        ]

        self.d: Dict[int, int] = {}
        self.dot_body: List[str] = []
        self.dot_footer = ["}\n"]

    def _add_node(self, node: AST, label) -> None:
        s = '  node{} [label="{}"]\n'.format(self.ncount, label)
        self.dot_body.append(s)
        self.d[id(node)] = self.ncount
        self.ncount += 1

    def visitAST(self, node: AST):
        if isinstance(node, BinaryOp):
            self._add_node(node, operator_labels[node.op.type])

            self.visitAST(node.left)
            self.visitAST(node.right)

            for child_node in (node.left, node.right):
                s = "  node{} -> node{}\n".format(
                    self.d[id(node)], self.d[id(child_node)]
                )
                self.dot_body.append(s)

        elif isinstance(node, Literal):
            self._add_node(node, node.value)

    def gendot(self) -> str:
        self.ncount = 1
        self.d = {}
        self.dot_body = []
        self.visitAST(self.root_node)
        return "".join(self.dot_header + self.dot_body + self.dot_footer)
