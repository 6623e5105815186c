"""
Settings for hosts that drive the Radish front-end.

Author: Radish developers
"""

import argparse
from dataclasses import dataclass
from typing import Optional


@dataclass
class Config:
    """What to read and which stages to show or run."""
    path: Optional[str] = None
    expression: Optional[str] = None
    show_tokens: bool = False
    show_ast: bool = False
    evaluate: bool = True
    require_eof: bool = True

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> "Config":
        return cls(
            path=args.path,
            expression=args.expression,
            show_tokens=args.tokens,
            show_ast=args.ast,
            evaluate=not args.no_eval,
            require_eof=not args.allow_trailing,
        )

    @property
    def source_name(self) -> str:
        if self.path is not None:
            return self.path
        return "<command-line>"
