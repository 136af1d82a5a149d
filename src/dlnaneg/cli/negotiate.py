"""CLI commands for negotiating playback of a probed media item."""

from __future__ import annotations

import json
from typing import IO, Any, NoReturn

import click

from dlnaneg.cli import get_default_device, get_registry
from dlnaneg.domain import FilterDirectives, ProbeReport
from dlnaneg.introspector import ProbeParseError, parse_ffprobe_output
from dlnaneg.negotiation import (
    CONTENT_FEATURES_HEADER,
    InvalidProbeData,
    NegotiationResult,
    build_content_features_header,
    evaluate,
    negotiate,
)

EXIT_INVALID_PROBE = 2


def _read_probe(probe_file: IO[str]) -> ProbeReport:
    try:
        data = json.load(probe_file)
    except json.JSONDecodeError as e:
        raise click.ClickException(f"Probe file is not valid JSON: {e}") from e
    try:
        return parse_ffprobe_output(data)
    except ProbeParseError as e:
        raise click.ClickException(str(e)) from e


def _abort_invalid_probe(error: InvalidProbeData) -> NoReturn:
    click.echo(f"Error: {error}", err=True)
    raise SystemExit(EXIT_INVALID_PROBE)


def _yes_no(value: bool) -> str:
    return "yes" if value else "no"


def result_to_dict(result: NegotiationResult) -> dict[str, Any]:
    """Convert a NegotiationResult to a JSON-serializable dict."""
    decision = result.decision
    return {
        "session_id": result.session_id,
        "profile": result.profile_name,
        "decision": {
            "container_format": decision.container_format,
            "is_video_media": decision.is_video_media,
            "is_audio_media": decision.is_audio_media,
            "format_needs_transcoding": decision.format_needs_transcoding,
            "audio_needs_transcoding": decision.audio_needs_transcoding,
            "video_needs_transcoding": decision.video_needs_transcoding,
            "needs_transcoding": decision.needs_transcoding,
        },
        "headers": {
            "Content-Type": result.content_type,
            CONTENT_FEATURES_HEADER: result.content_features,
        },
        "input_options": list(result.directives.input_options),
        "output_options": list(result.directives.output_options),
    }


def format_result(result: NegotiationResult) -> str:
    """Format a NegotiationResult for terminal output."""
    decision = result.decision
    if decision.is_video_media:
        media = "video"
    elif decision.is_audio_media:
        media = "audio"
    else:
        media = "other"

    lines = [
        f"Profile:           {result.profile_name}",
        f"Container:         {decision.container_format}",
        f"Media:             {media}",
        f"Needs transcoding: {_yes_no(decision.needs_transcoding)} "
        f"(format={_yes_no(decision.format_needs_transcoding)}, "
        f"audio={_yes_no(decision.audio_needs_transcoding)}, "
        f"video={_yes_no(decision.video_needs_transcoding)})",
        f"Content-Type:      {result.content_type}",
        f"{CONTENT_FEATURES_HEADER}: {result.content_features}",
        "Input options:",
    ]
    lines.extend(f"  {opt}" for opt in result.directives.input_options)
    lines.append("Output options:")
    lines.extend(f"  {opt}" for opt in result.directives.output_options)
    return "\n".join(lines)


@click.command("negotiate")
@click.argument("probe_file", type=click.File("r"))
@click.option("--device", default=None, help="Renderer friendly name.")
@click.option(
    "--audio-shift",
    default=None,
    help="Input option correcting audio offset, e.g. '-itsoffset 0.5'.",
)
@click.option(
    "--subtitle-filter",
    default=None,
    help="Output option burning in subtitles.",
)
@click.option(
    "--rescale-filter",
    default=None,
    help="Output option rescaling video.",
)
@click.option(
    "--json",
    "json_output",
    is_flag=True,
    help="Output in JSON format.",
)
@click.pass_context
def negotiate_command(
    ctx: click.Context,
    probe_file: IO[str],
    device: str | None,
    audio_shift: str | None,
    subtitle_filter: str | None,
    rescale_filter: str | None,
    json_output: bool,
) -> None:
    """Negotiate playback of a probed item with a renderer.

    PROBE_FILE is ffprobe JSON output (-show_format -show_streams), or '-'
    to read from stdin.

    Examples:

        ffprobe -v error -print_format json -show_format -show_streams movie.mkv \\
            | dlnaneg negotiate - --device "Samsung DTV DMR"
    """
    report = _read_probe(probe_file)
    profile = get_registry(ctx).for_device(device or get_default_device(ctx))
    filters = FilterDirectives(
        audio_shift_correction=audio_shift,
        subtitle_filter=subtitle_filter,
        rescale_filter=rescale_filter,
    )

    try:
        result = negotiate(report, profile, filters)
    except InvalidProbeData as e:
        _abort_invalid_probe(e)

    if json_output:
        click.echo(json.dumps(result_to_dict(result), indent=2))
    else:
        click.echo(format_result(result))


@click.command("header")
@click.argument("probe_file", type=click.File("r"))
@click.option("--device", default=None, help="Renderer friendly name.")
@click.pass_context
def header_command(ctx: click.Context, probe_file: IO[str], device: str | None) -> None:
    """Print the contentFeatures.dlna.org value for a probed item.

    PROBE_FILE is ffprobe JSON output, or '-' to read from stdin.
    """
    report = _read_probe(probe_file)
    profile = get_registry(ctx).for_device(device or get_default_device(ctx))
    try:
        decision = evaluate(report, profile)
    except InvalidProbeData as e:
        _abort_invalid_probe(e)
    click.echo(build_content_features_header(decision, profile))


@click.command("remap")
@click.argument("renderer")
@click.argument("mime")
@click.option(
    "--device",
    default=None,
    help="Profile to use (default: looked up from RENDERER).",
)
@click.pass_context
def remap_command(
    ctx: click.Context, renderer: str, mime: str, device: str | None
) -> None:
    """Print the MIME type RENDERER expects in place of MIME.

    Examples:

        dlnaneg remap "Samsung DTV DMR" video/x-matroska
    """
    profile = get_registry(ctx).for_device(device or renderer)
    click.echo(profile.remap_mime(renderer, mime))
