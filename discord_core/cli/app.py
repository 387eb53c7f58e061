"""CLI application - main entry point with all commands."""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

import click
from rich.console import Console
from rich.markup import escape

from discord_core.core.exceptions import DiscordCoreError

if TYPE_CHECKING:
    from discord_core.core.discord.snowflake import Snowflake

console = Console(emoji=False)
error_console = Console(stderr=True, emoji=False)


class SnowflakeParamType(click.ParamType):
    """Click parameter type for Discord snowflake IDs."""

    name = "snowflake"

    def convert(self, value: str, param: click.Parameter | None, ctx: click.Context | None) -> Snowflake:
        from discord_core.core.discord.snowflake import Snowflake

        if isinstance(value, Snowflake):
            return value
        result = Snowflake.try_parse_digits(value)
        if result is None:
            self.fail(f"Invalid snowflake: {value!r}", param, ctx)
        return result


SNOWFLAKE = SnowflakeParamType()


@click.group()
@click.version_option(package_name="discord-core")
@click.option(
    "-v",
    "--verbose",
    is_flag=True,
    envvar="DISCORD_CORE_VERBOSE",
    help="Enable debug logging.",
)
def cli(verbose: bool) -> None:
    """discord-core - work with Discord emote tokens and member patches."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(name)s - %(levelname)s - %(message)s",
        )


@cli.command()
@click.argument("tokens", nargs=-1, required=True)
def parse(tokens: tuple[str, ...]) -> None:
    """Parse emote tokens such as <:dab:277855270321782784>."""
    from discord_core.core.discord.models.emote import Emote

    failed = False
    for token in tokens:
        try:
            emote = Emote.parse(token)
        except DiscordCoreError as exc:
            error_console.print(f"[red]{escape(str(exc))}[/red]")
            failed = True
            continue
        console.print(
            f"{emote.id} | {escape(emote.name)} | {emote.animated} | "
            f"{emote.created_at.isoformat()} | {emote.url}",
            soft_wrap=True,
        )

    if failed:
        sys.exit(1)


@cli.command()
@click.argument("emote_id", type=SNOWFLAKE)
@click.argument("name")
@click.option("--animated/--static", default=False, help="Render as an animated emote.")
def render(emote_id: Snowflake, name: str, animated: bool) -> None:
    """Render the canonical token for an emote."""
    from discord_core.core.discord.models.emote import Emote

    if ":" in name:
        raise click.BadParameter("Emote names cannot contain ':'.", param_hint="NAME")
    console.print(escape(str(Emote(id=emote_id, name=name, animated=animated))), soft_wrap=True)


@cli.command()
@click.argument("text", required=False)
def extract(text: str | None) -> None:
    """List emotes found in TEXT (or standard input)."""
    from discord_core.core.markdown.parser import extract_emotes

    if text is None:
        text = click.get_text_stream("stdin").read()

    for emote in extract_emotes(text):
        console.print(f"{emote.id} | {escape(emote.name)} | {emote}", soft_wrap=True)


@cli.command("member-patch")
@click.option("--mute/--no-mute", default=None, help="Server-mute the member.")
@click.option("--deaf/--no-deaf", default=None, help="Server-deafen the member.")
@click.option("--nick", default=None, help="New nickname.")
@click.option("--clear-nick", is_flag=True, help="Remove the nickname.")
@click.option("--role", "role_ids", type=SNOWFLAKE, multiple=True, help="Role ID (repeatable).")
@click.option("--clear-roles", is_flag=True, help="Remove all roles.")
@click.option("--channel", "channel_id", type=SNOWFLAKE, default=None, help="Voice channel to move to.")
@click.option("--disconnect", is_flag=True, help="Disconnect the member from voice.")
def member_patch(
    mute: bool | None,
    deaf: bool | None,
    nick: str | None,
    clear_nick: bool,
    role_ids: tuple[Snowflake, ...],
    clear_roles: bool,
    channel_id: Snowflake | None,
    disconnect: bool,
) -> None:
    """Print the JSON body of a modify-guild-member request."""
    from discord_core.core.discord.models.guild_member_properties import GuildMemberProperties

    if nick is not None and clear_nick:
        raise click.UsageError("--nick and --clear-nick are mutually exclusive.")
    if role_ids and clear_roles:
        raise click.UsageError("--role and --clear-roles are mutually exclusive.")
    if channel_id is not None and disconnect:
        raise click.UsageError("--channel and --disconnect are mutually exclusive.")

    props = GuildMemberProperties()
    if mute is not None:
        props.mute = mute
    if deaf is not None:
        props.deaf = deaf
    if nick is not None:
        props.nickname = nick
    elif clear_nick:
        props.nickname = None
    if role_ids or clear_roles:
        props.role_ids = list(role_ids)
    if channel_id is not None:
        props.channel_id = channel_id
    elif disconnect:
        props.channel_id = None

    console.print_json(data=props.to_payload())


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
