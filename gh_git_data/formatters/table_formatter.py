"""Format references and tags as rich console tables."""

from typing import List, Optional

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ..api.models import Reference, Tag
from ..parsers.ref_parser import RefKind
from .color_scheme import ColorScheme


class TableFormatter:
    """Format references and tags as rich console tables."""

    def __init__(self, console: Optional[Console] = None):
        """
        Initialize formatter.

        Args:
            console: Optional Rich console instance
        """
        self.console = console or Console()
        self.colors = ColorScheme()

    def print_reference(self, reference: Reference) -> None:
        """Print a single reference."""
        self.print_references([reference], title="Reference")

    def print_references(self, references: List[Reference], title: str = "References") -> None:
        """Print references in the order given."""
        table = Table(
            title=title,
            show_header=True,
            header_style=self.colors.TABLE_HEADER,
        )
        table.add_column("Ref", style=self.colors.REF_NAME, no_wrap=False)
        table.add_column("Kind", justify="center", width=8)
        table.add_column("Type", justify="center", width=8)
        table.add_column("SHA", style=self.colors.SHA, no_wrap=True)

        for reference in references:
            table.add_row(
                escape(reference.ref),
                self._colorize_kind(reference.kind),
                reference.object_type,
                reference.sha,
            )

        self.console.print(table)
        if len(references) != 1:
            self.console.print(f"[dim]Total references: {len(references)}[/dim]")

    def print_tag(self, tag: Tag) -> None:
        """Print an annotated tag object."""
        self.console.print(f"\n[{self.colors.HEADER}]Tag {escape(tag.tag)}[/{self.colors.HEADER}]")
        self.console.print(f"SHA: {tag.sha}")
        self.console.print(f"Object: {tag.object.type} {tag.object.sha}")
        self.console.print(f"Tagger: {escape(tag.tagger.name)} <{escape(tag.tagger.email)}>")
        self.console.print(f"Date: {escape(tag.tagger.date)}")
        if tag.verified is not None:
            self.console.print(f"Verified: {self._colorize_verified(tag.verified)}")
        self.console.print(f"\n{tag.message}\n", markup=False)

    def _colorize_kind(self, kind: RefKind) -> str:
        if kind == RefKind.BRANCH:
            color = self.colors.BRANCH
        elif kind == RefKind.TAG:
            color = self.colors.TAG
        else:
            color = self.colors.OTHER
        return f"[{color}]{kind.value}[/{color}]"

    def _colorize_verified(self, verified: bool) -> str:
        if verified:
            return f"[{self.colors.VERIFIED}]yes[/{self.colors.VERIFIED}]"
        return f"[{self.colors.UNVERIFIED}]no[/{self.colors.UNVERIFIED}]"
