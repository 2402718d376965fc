"""Output formatters for CLI commands"""

import csv
import json
from io import StringIO
from typing import Dict, List

from rich.console import Console
from rich.table import Table


class OutputFormatter:
    """Base class for output formatters"""

    def format_regions(self, regions: List[Dict[str, str]]) -> str:
        raise NotImplementedError

    def format_region(self, region: Dict[str, str]) -> str:
        raise NotImplementedError


class TableFormatter(OutputFormatter):
    """Human-readable tables rendered with rich"""

    def _render(self, table: Table) -> str:
        buffer = StringIO()
        console = Console(file=buffer, force_terminal=False, width=100)
        console.print(table)
        return buffer.getvalue().rstrip("\n")

    def format_regions(self, regions: List[Dict[str, str]]) -> str:
        table = Table(
            title=f"AWS Regions ({len(regions)})",
            show_header=True,
            header_style="bold magenta",
        )
        table.add_column("Region Code", style="cyan", no_wrap=True)
        table.add_column("Region Name", style="green")

        for region in regions:
            table.add_row(region["code"], region["name"])

        return self._render(table)

    def format_region(self, region: Dict[str, str]) -> str:
        table = Table(show_header=False, box=None)
        table.add_column("Field", style="bold")
        table.add_column("Value")

        table.add_row("Region", region["member"])
        table.add_row("Code", region["code"])
        table.add_row("Name", region["name"])

        return self._render(table)


class JSONFormatter(OutputFormatter):
    """JSON output"""

    def format_regions(self, regions: List[Dict[str, str]]) -> str:
        return json.dumps({"count": len(regions), "regions": regions}, indent=2)

    def format_region(self, region: Dict[str, str]) -> str:
        return json.dumps(region, indent=2)


class CSVFormatter(OutputFormatter):
    """CSV output"""

    def format_regions(self, regions: List[Dict[str, str]]) -> str:
        buffer = StringIO()
        writer = csv.writer(buffer, lineterminator="\n")
        writer.writerow(["Region Code", "Region Name"])
        for region in regions:
            writer.writerow([region["code"], region["name"]])
        return buffer.getvalue()

    def format_region(self, region: Dict[str, str]) -> str:
        buffer = StringIO()
        writer = csv.writer(buffer, lineterminator="\n")
        writer.writerow(["Region", "Region Code", "Region Name"])
        writer.writerow([region["member"], region["code"], region["name"]])
        return buffer.getvalue()


def get_formatter(format_name: str) -> OutputFormatter:
    """Get formatter for the given output format name

    Raises:
        ValueError: If the format is unknown
    """
    formatters = {
        "table": TableFormatter,
        "json": JSONFormatter,
        "csv": CSVFormatter,
    }
    if format_name not in formatters:
        raise ValueError(
            f"Unknown format '{format_name}'. Choose from: {', '.join(formatters)}"
        )
    return formatters[format_name]()
