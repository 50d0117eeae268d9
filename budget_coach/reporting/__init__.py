"""
budget_coach.reporting — Terminal formatting of engine output.

Formatters take engine records (rules, snapshots, match results,
recommendations) and return plain multi-line strings for ``typer.echo()``.
They never compute advice themselves.

Modules:
  formatters — currency formatting and ASCII blocks for the Typer CLI.
"""
