# SPDX-License-Identifier: Apache-2.0
"""CLI entrypoints."""
from __future__ import annotations

from pathlib import Path
from typing import Optional

import orjson
import typer
from PIL import Image, ImageOps

from facemetrics.config import load_config
from facemetrics.features.extractor import FeatureExtractor
from facemetrics.llm.base import LLMError
from facemetrics.llm.openai_client import DescriptionClient
from facemetrics.llm.traits import is_valid_trait, strongest_trait, trait_image
from facemetrics.logging_utils import configure_logging
from facemetrics.pipeline import FaceAnalysisSession
from facemetrics.platform import PlatformClass
from facemetrics.schemas import PanelBounds
from facemetrics.utils.io import ensure_dir, load_frame, load_landmarks, write_json
from facemetrics.viz.raster import RasterCanvas

app = typer.Typer(help="Facial landmark metrics and overlays.")


def _platform(platform: Optional[str], user_agent: Optional[str]) -> PlatformClass:
    if platform:
        try:
            return PlatformClass.parse(platform)
        except ValueError as e:
            raise typer.BadParameter(str(e), param_hint="--platform") from e
    return PlatformClass.from_user_agent(user_agent)


@app.callback()
def main(log_level: str = typer.Option("WARNING", "--log-level", help="Logging level")):
    configure_logging(log_level)


@app.command()
def features(
    landmarks: Path,
    image: Optional[Path] = typer.Option(None, "--image", help="Frame used for color sampling"),
    platform: Optional[str] = typer.Option(None, "--platform", help="iOS, Android or PC"),
    user_agent: Optional[str] = typer.Option(None, "--user-agent", help="Classify platform from a UA string"),
    output: Optional[Path] = typer.Option(None, "-o", "--output", help="Also write the JSON to this file"),
):
    """Print the FaceFeatures record for a landmark file as JSON."""
    frame = load_frame(image) if image else None
    extractor = FeatureExtractor(_platform(platform, user_agent), load_config())
    result = extractor.extract(load_landmarks(landmarks), frame)
    data = result.to_dict()
    if output:
        write_json(output, data)
    typer.echo(orjson.dumps(data, option=orjson.OPT_INDENT_2).decode())


@app.command()
def overlay(
    landmarks: Path,
    image: Path,
    output: Path = typer.Option(..., "-o", "--output", help="Where to write the PNG"),
    panel: Optional[str] = typer.Option(None, "--panel", help="Panel bounds as x,y,width,height"),
    platform: Optional[str] = typer.Option(None, "--platform"),
    user_agent: Optional[str] = typer.Option(None, "--user-agent"),
    mirror: bool = typer.Option(True, "--mirror/--no-mirror", help="Flip the result like a selfie preview"),
    platform_info: bool = typer.Option(False, "--platform-info", help="Draw the platform banner"),
):
    """Draw the feature overlay on an image."""
    cfg = load_config()
    if platform_info:
        overlay_cfg = cfg.overlay.model_copy(update={"show_platform_info": True})
        cfg = cfg.model_copy(update={"overlay": overlay_cfg})
    bounds = PanelBounds.parse(panel) if panel else None
    frame = load_frame(image)
    canvas = RasterCanvas(Image.fromarray(frame))

    session = FaceAnalysisSession(_platform(platform, user_agent), cfg)
    result = session.process_frame(load_landmarks(landmarks), frame, canvas, bounds)
    if result.is_empty:
        typer.echo("No face geometry found; writing the image unchanged.", err=True)

    out = canvas.image.convert("RGB")
    if mirror:
        out = ImageOps.mirror(out)
    ensure_dir(output.parent)
    out.save(output)
    typer.echo(f"Overlay saved to {output}")


@app.command()
def describe(
    landmarks: Path,
    name: Optional[str] = typer.Option(None, "--name", help="Name used in the description"),
    image: Optional[Path] = typer.Option(None, "--image"),
    platform: Optional[str] = typer.Option(None, "--platform"),
    user_agent: Optional[str] = typer.Option(None, "--user-agent"),
):
    """Ask the language model for a titled description of the features."""
    cfg = load_config()
    frame = load_frame(image) if image else None
    extractor = FeatureExtractor(_platform(platform, user_agent), cfg)
    result = extractor.extract(load_landmarks(landmarks), frame)
    if result.is_empty:
        typer.echo("No face geometry found.", err=True)
        raise typer.Exit(code=1)
    try:
        ai = DescriptionClient(cfg.llm).describe(result, name)
    except LLMError as e:
        typer.echo(e.user_message, err=True)
        raise typer.Exit(code=1) from e
    typer.echo(ai.title)
    typer.echo("")
    typer.echo(ai.description)

    trait = strongest_trait(ai.description)
    if trait is not None:
        typer.echo("")
        typer.echo(f"Strongest trait: {trait.left} ({trait.percent}%)")
        if is_valid_trait(trait.left):
            typer.echo(f"Card image: {trait_image(trait.left)}")


if __name__ == "__main__":
    app()
