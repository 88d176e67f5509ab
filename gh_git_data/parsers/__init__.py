"""Reference name parsers."""

from .ref_parser import RefKind, RefName, parse_ref, parse_branch, parse_tag

__all__ = ["RefKind", "RefName", "parse_ref", "parse_branch", "parse_tag"]
