"""Terminal notification adapter."""

import click

from ..ports.notifier import Severity


class ClickNotifier:
    """Implements Notifier protocol by echoing to the terminal."""

    def notify(self, title: str, description: str, severity: Severity = Severity.INFO) -> None:
        if severity == Severity.ERROR:
            click.secho(f"✗ {title}: {description}", fg="red", err=True)
        else:
            click.secho(f"✓ {title}: {description}", fg="green")
