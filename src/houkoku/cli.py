"""houkoku CLI - status message helper."""

import logging
import sys
from datetime import date, datetime

import click

from .config import Config, load_config
from .core.bullets import normalize
from .core.session import (
    EndAdjusted,
    EndEdited,
    EndSetToNow,
    PresetApplied,
    SessionState,
    StartAdjusted,
    StartEdited,
    StartSetToNow,
    TaskEdited,
)
from .core.timeofday import format_range, parse_time
from .core.variants import get_variant
from .workflows import (
    compose_session,
    copy_message,
    copy_todo,
    dispatch,
    get_clipboard,
    get_notifier,
    get_store,
    load_session,
)


@click.group()
@click.version_option()
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.pass_context
def main(ctx, debug: bool):
    """houkoku - turn task notes and a time range into a chat status message."""
    if debug:
        logging.basicConfig(
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            level=logging.DEBUG,
        )
    ctx.obj = load_config()


def _load(config: Config):
    store = get_store(config)
    return store, load_session(store, config)


def _show_state(state: SessionState, config: Config) -> None:
    message = compose_session(state, config)
    time_range = format_range(date.today(), state.start_time, state.end_time, config.date_format)
    click.echo(f"Time: {time_range or '(not set)'}\n")
    click.echo(message.chat_message)


@main.command()
@click.pass_obj
def show(config: Config):
    """Preview the chat message."""
    _, state = _load(config)
    _show_state(state, config)


@main.command()
@click.pass_obj
def todo(config: Config):
    """Preview the to-do block."""
    _, state = _load(config)
    message = compose_session(state, config)
    if not message.todo_block:
        click.echo(f"Variant '{config.variant}' has no to-do block.")
        return
    click.echo(message.todo_block)


@main.command()
@click.argument("role")
@click.option("--text", "-t", default=None, help="New text ('-' reads stdin)")
@click.pass_obj
def edit(config: Config, role: str, text: str | None):
    """Edit a task field (next, completed, must, have_to)."""
    variant = get_variant(config.variant)
    try:
        role_def = variant.role(role)
    except KeyError as e:
        raise click.BadParameter(str(e.args[0]), param_hint="ROLE")

    store, state = _load(config)

    if text == "-":
        text = click.get_text_stream("stdin").read()
    elif text is None:
        from .editor import edit_task_text

        text = edit_task_text(role_def.label, state.task(role))
        if text is None:
            click.echo("Cancelled.")
            return

    dispatch(store, state, TaskEdited(role, text))
    click.echo(f"Updated {role}.")


def _change_time(config: Config, which: str, value: str | None, use_now: bool, adjust: int | None) -> None:
    chosen = sum([value is not None, use_now, adjust is not None])
    if chosen != 1:
        raise click.UsageError("Give exactly one of TIME, --now or --adjust.")

    variant = get_variant(config.variant)
    if adjust is not None and adjust not in variant.adjustments:
        allowed = ", ".join(f"{m:+d}" for m in variant.adjustments)
        raise click.BadParameter(f"must be one of {allowed}", param_hint="--adjust")
    if value is not None and parse_time(value) is None:
        raise click.BadParameter(f"'{value}' is not HH:MM", param_hint="TIME")

    now = datetime.now()
    if which == "start":
        if value is not None:
            event = StartEdited(value)
        elif use_now:
            event = StartSetToNow(now)
        else:
            event = StartAdjusted(adjust)
    else:
        if value is not None:
            event = EndEdited(value)
        elif use_now:
            event = EndSetToNow(now)
        else:
            event = EndAdjusted(adjust)

    store, state = _load(config)
    state = dispatch(store, state, event, now)
    click.echo(f"{state.start_time}〜{state.end_time}")


@main.command()
@click.argument("value", required=False)
@click.option("--now", "use_now", is_flag=True, help="Use the current time")
@click.option("--adjust", type=int, default=None, help="Shift by minutes (±5, ±15, ±30)")
@click.pass_obj
def start(config: Config, value: str | None, use_now: bool, adjust: int | None):
    """Set the start time."""
    _change_time(config, "start", value, use_now, adjust)


@main.command()
@click.argument("value", required=False)
@click.option("--now", "use_now", is_flag=True, help="Use the current time")
@click.option("--adjust", type=int, default=None, help="Shift by minutes (±5, ±15, ±30)")
@click.pass_obj
def end(config: Config, value: str | None, use_now: bool, adjust: int | None):
    """Set the end time."""
    _change_time(config, "end", value, use_now, adjust)


@main.command()
@click.argument("minutes", type=int, required=False)
@click.pass_obj
def preset(config: Config, minutes: int | None):
    """Set the range to now -> now + MINUTES."""
    variant = get_variant(config.variant)
    if minutes is None:
        click.echo("Presets: " + ", ".join(str(m) for m in variant.presets))
        return
    if minutes not in variant.presets:
        allowed = ", ".join(str(m) for m in variant.presets)
        raise click.BadParameter(f"must be one of {allowed}", param_hint="MINUTES")

    now = datetime.now()
    store, state = _load(config)
    state = dispatch(store, state, PresetApplied(now, minutes), now)
    click.echo(f"{state.start_time}〜{state.end_time}")


@main.command()
@click.pass_obj
def copy(config: Config):
    """Copy the chat message and advance the task fields."""
    store, state = _load(config)
    _, ok = copy_message(store, state, config, get_clipboard(), get_notifier())
    if not ok:
        sys.exit(1)


@main.command("copy-todo")
@click.pass_obj
def copy_todo_cmd(config: Config):
    """Copy the to-do block."""
    _, state = _load(config)
    if not copy_todo(state, config, get_clipboard(), get_notifier()):
        sys.exit(1)


@main.command("format")
def format_cmd():
    """Normalize task text from stdin into a bulleted block."""
    click.echo(normalize(click.get_text_stream("stdin").read()))


if __name__ == "__main__":
    main()
