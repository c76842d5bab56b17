# commands/handlers.py
"""Console command handlers."""

from dataclasses import dataclass
from typing import Callable, List, Optional

from ..helpers import join_ids, parse_int, remove_value
from ..host import Host
from ..logging_utils import get_logger
from ..repeater_state import RepeaterState

log = get_logger(__name__)

Handler = Callable[..., None]


# ---------------------------------------------------------------------------
# Forget / Show
# ---------------------------------------------------------------------------

def forget_event(args: List[str], *, host: Host, state: RepeaterState) -> None:
    if not args:
        return
    try:
        event_id = parse_int(args[0])
    except ValueError:
        return
    remove_value(host.player.events_seen, event_id)
    log.debug(f"Forgetting event id: {event_id}")


def forget_mail(args: List[str], *, host: Host, state: RepeaterState) -> None:
    if not args:
        return
    remove_value(host.player.mail_received, args[0])
    log.debug(f"Forgetting mail id: {args[0]}")


def forget_response(args: List[str], *, host: Host, state: RepeaterState) -> None:
    if not args:
        return
    try:
        response_id = parse_int(args[0])
    except ValueError:
        return
    remove_value(host.player.responses_answered, response_id)
    log.debug(f"Forgetting Response ID: {response_id}")


def show_events(args: List[str], *, host: Host, state: RepeaterState) -> None:
    log.debug(f"Events seen: {join_ids(host.player.events_seen)}")


def show_mail(args: List[str], *, host: Host, state: RepeaterState) -> None:
    log.debug(f"Mail Seen: {join_ids(host.player.mail_received)}")


def show_responses(args: List[str], *, host: Host, state: RepeaterState) -> None:
    log.debug(f"Response IDs: {join_ids(host.player.responses_answered)}")


def send_mail(args: List[str], *, host: Host, state: RepeaterState) -> None:
    if not args:
        return
    host.add_mail_for_tomorrow(args[0])
    log.debug(f"Check Mail Tomorrow!! Sending: {args[0]}")


# ---------------------------------------------------------------------------
# Manual Repeater
# ---------------------------------------------------------------------------

def repeater_add(args: List[str], *, host: Host, state: RepeaterState) -> None:
    state.manual.add(host.player, args)


def repeater_save(args: List[str], *, host: Host, state: RepeaterState) -> None:
    if not args:
        log.error("No file name entered. usage: repeater-save <filename>")
        return
    state.manual.save(args[0])


def repeater_load(args: List[str], *, host: Host, state: RepeaterState) -> None:
    if not args:
        log.error("No file name entered. usage: repeater-load <filename>")
        return
    state.manual.load(host.player, args[0])


# ---------------------------------------------------------------------------
# Inject
# ---------------------------------------------------------------------------

_INJECT_KINDS = {
    # kind: (player list attribute, parse, label)
    "event": ("events_seen", parse_int, "seen events list"),
    "response": ("responses_answered", parse_int, "response list"),
    "mail": ("mail_received", str, "received mail list"),
}


def inject(args: List[str], *, host: Host, state: RepeaterState) -> None:
    """inject <event|mail|response> <id>: add an ID as if the player had seen it.

    A non-numeric event or response ID raises ValueError.
    """
    if not args:
        return
    kind = args[0]
    spec = _INJECT_KINDS.get(kind)
    if spec is None or len(args) > 2:
        log.warning("usage: inject <event|mail|response> <ID>")
        return
    if len(args) == 1:
        log.error(f"No {kind} ID entered.  Please input a {kind} ID")
        return

    attr, parse, label = spec
    value = parse(args[1])
    items = getattr(host.player, attr)
    if value in items:
        log.warning(f"{args[1]} Already exists within the {label}.")
        return
    items.append(value)
    log.debug(f"{args[1]} has been added to the {label}.")


# ---------------------------------------------------------------------------
# Registration
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class CommandSpec:
    name: str
    alias: Optional[str]
    usage: str
    handler: Handler


COMMANDS: List[CommandSpec] = [
    CommandSpec("forget-event", "eventforget", "usage: forget-event <id>", forget_event),
    CommandSpec("show-events", "showevents", "usage: show-events  Lists all completed events", show_events),
    CommandSpec("show-mail", "showmail", "usage: show-mail  Lists all seen mail", show_mail),
    CommandSpec("forget-mail", "mailforget", "usage: forget-mail <id>", forget_mail),
    CommandSpec("send-mail", "sendme", "usage: send-mail <id>  Delivers the mail tomorrow", send_mail),
    CommandSpec(
        "show-responses", "showresponse", "usage: show-responses  Lists Response IDs. For ADVANCED USERS!!", show_responses
    ),
    CommandSpec("forget-response", "responseforget", "usage: forget-response <id>", forget_response),
    CommandSpec(
        "repeater-add",
        "repeateradd",
        "usage: repeater-add <id(optional)...>  Create a repeatable event. "
        "If no id is given, the last seen will be repeated. Works on Next Day",
        repeater_add,
    ),
    CommandSpec(
        "repeater-save",
        "repeatersave",
        "usage: repeater-save <filename>  Creates a textfile with all events you set to repeat manually.",
        repeater_save,
    ),
    CommandSpec(
        "repeater-load", "repeaterload", "usage: repeater-load <filename>  Loads the file you designate.", repeater_load
    ),
    CommandSpec(
        "inject",
        None,
        "usage: inject <event|mail|response> <ID>  Example: 'inject event 1324329'  Inject IDs into the game.",
        inject,
    ),
]


def command_names(include_aliases: bool = True) -> List[str]:
    names: List[str] = []
    for spec in COMMANDS:
        names.append(spec.name)
        if include_aliases and spec.alias:
            names.append(spec.alias)
    return names


def register_commands(host: Host, state: RepeaterState) -> None:
    """Add every command (and its legacy alias) to the host console."""
    for spec in COMMANDS:
        def _run(command: str, args: List[str], fn: Handler = spec.handler) -> None:
            fn(list(args), host=host, state=state)

        host.add_command(spec.name, spec.usage, _run)
        if spec.alias:
            host.add_command(spec.alias, spec.usage, _run)
