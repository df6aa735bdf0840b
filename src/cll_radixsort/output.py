"""Write sorted circular lists to text, JSON and CSV files."""

import csv
import json
from pathlib import Path
from typing import TextIO

from .cll import Node, count_nodes, iter_values


def write_values(rear: Node | None, stream: TextIO) -> None:
    """Write one value per line to an open text stream."""
    for value in iter_values(rear):
        stream.write(f"{value}\n")


def generate_text(rear: Node | None, output_file: Path) -> None:
    """Generate a plain text file with one value per line.

    Args:
        rear: Rear node of the sorted list.
        output_file: Path to write the text file.
    """
    with open(output_file, "w") as f:
        write_values(rear, f)


def generate_json(rear: Node | None, output_file: Path, radix: int) -> None:
    """Generate a JSON file with the radix, the item count and the values.

    Args:
        rear: Rear node of the sorted list.
        output_file: Path to write the JSON file.
        radix: Radix the values were sorted in.
    """
    values = list(iter_values(rear))
    result = {
        "radix": radix,
        "count": len(values),
        "values": values,
    }
    with open(output_file, "w") as f:
        json.dump(result, f, indent=2)


def generate_csv(rear: Node | None, output_file: Path) -> None:
    """Generate a CSV file of (position, value) rows, positions from 1.

    Args:
        rear: Rear node of the sorted list.
        output_file: Path to write the CSV file.
    """
    with open(output_file, "w", newline="") as f:
        writer = csv.DictWriter(f, fieldnames=["position", "value"])
        writer.writeheader()
        for position, value in enumerate(iter_values(rear), start=1):
            writer.writerow({"position": position, "value": value})


def generate_summary(rear: Node | None, radix: int, passes: int) -> str:
    """Generate a human-readable summary of a sort.

    Args:
        rear: Rear node of the sorted list.
        radix: Radix the values were sorted in.
        passes: Number of scatter/gather passes that were run.

    Returns:
        Multi-line summary text.
    """
    lines = [
        "=" * 40,
        "Radix Sort Summary",
        "=" * 40,
        f"Radix:  {radix}",
        f"Items:  {count_nodes(rear)}",
        f"Passes: {passes}",
    ]
    if rear is not None:
        lines.append(f"Min:    {rear.next.value}")
        lines.append(f"Max:    {rear.value}")
    return "\n".join(lines) + "\n"
