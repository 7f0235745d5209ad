"""
Console formatting for the test database generator.

Builds the closing summary and error blocks printed by the CLI.
"""

from pathlib import Path

SEPARATOR = "=" * 60


def format_generation_summary(
    total_recipes: int,
    duration_seconds: float,
    output_path: Path | str,
) -> str:
    """
    Format the summary shown after a database has been written.

    Args:
        total_recipes: Number of recipes in the written database
        duration_seconds: Wall-clock time the generation took
        output_path: Where the database file was saved

    Returns:
        Formatted string for CLI output
    """
    output_parts = [
        "",
        SEPARATOR,
        "Test recipe database generated!",
        SEPARATOR,
        f"Generated: {total_recipes} recipes",
        f"Time: {duration_seconds:.3f}s",
        f"Saved to: {output_path}",
        SEPARATOR,
    ]

    return "\n".join(output_parts)


def format_progress(generated: int, target_count: int) -> str:
    """Return the progress line printed every tenth recipe."""
    return f"Generated {generated}/{target_count} test recipes..."


def format_error(error_message: str) -> str:
    """
    Format an error message for CLI display.

    Args:
        error_message: The error description

    Returns:
        Formatted error string
    """
    return f"\n{SEPARATOR}\nError: {error_message}\n{SEPARATOR}\n"
