"""CLI commands for device profiles."""

import json
from typing import Any

import click

from dlnaneg.cli import get_registry
from dlnaneg.profiles import DeviceProfile, flag_names, format_flags


def profile_to_dict(profile: DeviceProfile) -> dict[str, Any]:
    """Convert a DeviceProfile to a JSON-serializable dict."""
    return {
        "name": profile.name,
        "description": profile.description,
        "valid_formats": sorted(profile.valid_formats),
        "audio_needs_transcoding_codecs": sorted(
            profile.audio_needs_transcoding_codecs
        ),
        "video_needs_transcoding_codecs": sorted(
            profile.video_needs_transcoding_codecs
        ),
        "transcoded_media_profile": profile.transcoded_media_profile,
        "content_type": profile.content_type,
        "flags": flag_names(profile.flags),
        "flags_hex": format_flags(profile.flags),
        "mime_remap": {
            device: dict(table) for device, table in profile.mime_remap.items()
        },
    }


@click.group("profiles")
def profiles_group() -> None:
    """Inspect device profiles."""
    pass


@profiles_group.command("list")
@click.option(
    "--json",
    "json_output",
    is_flag=True,
    help="Output in JSON format.",
)
@click.pass_context
def list_profiles_cmd(ctx: click.Context, json_output: bool) -> None:
    """List built-in and user device profiles."""
    registry = get_registry(ctx)
    names = sorted(registry)

    if json_output:
        click.echo(json.dumps([profile_to_dict(registry[n]) for n in names], indent=2))
        return

    click.echo(f"{'NAME':<25} {'MEDIA PROFILE':<22} {'DESCRIPTION':<30}")
    click.echo("-" * 79)
    for name in names:
        profile = registry[name]
        marker = "*" if profile is registry.default else " "
        desc = (profile.description or "-")[:30]
        click.echo(
            f"{name[:24] + marker:<25} {profile.transcoded_media_profile:<22} {desc}"
        )


@profiles_group.command("show")
@click.argument("profile_name")
@click.option(
    "--json",
    "json_output",
    is_flag=True,
    help="Output in JSON format.",
)
@click.pass_context
def show_profile(ctx: click.Context, profile_name: str, json_output: bool) -> None:
    """Show a device profile.

    PROFILE_NAME is the profile name or renderer friendly name.
    """
    registry = get_registry(ctx)
    if profile_name not in registry:
        raise click.ClickException(f"Profile not found: {profile_name}")

    data = profile_to_dict(registry[profile_name])
    if json_output:
        click.echo(json.dumps(data, indent=2))
        return

    click.echo(f"Name:              {data['name']}")
    click.echo(f"Description:       {data['description'] or '-'}")
    click.echo(f"Valid formats:     {', '.join(data['valid_formats']) or '-'}")
    click.echo(
        "Audio transcode:   "
        f"{', '.join(data['audio_needs_transcoding_codecs']) or '-'}"
    )
    click.echo(
        "Video transcode:   "
        f"{', '.join(data['video_needs_transcoding_codecs']) or '-'}"
    )
    click.echo(f"Media profile:     {data['transcoded_media_profile']}")
    click.echo(f"Content type:      {data['content_type']}")
    click.echo(f"Flags:             {data['flags_hex']} ({', '.join(data['flags'])})")
    for device, table in data["mime_remap"].items():
        click.echo(f"MIME remap ({device}):")
        for source, target in table.items():
            click.echo(f"  {source} -> {target}")
