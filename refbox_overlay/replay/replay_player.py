import argparse
import logging
import pickle
import warnings
from pathlib import Path
from typing import Generator, Optional, Union

import pygame

from refbox_overlay.config.logging_setup import configure_logging
from refbox_overlay.config.profiles.profile_loader import ViewerProfile, load_profile
from refbox_overlay.config.settings import REPLAY_BASE_PATH
from refbox_overlay.data_sources.snapshot import SnapshotSource, TrackingSnapshot
from refbox_overlay.render.frame import FieldStateRenderer
from refbox_overlay.render.pygame_surface import PygameSurface
from refbox_overlay.replay.entities import ReplayMetadata

logger = logging.getLogger(__name__)


class ReplayViewer:
    """Feeds recorded snapshots through the overlay renderer into a pygame window."""

    def __init__(self, profile: ViewerProfile, render_mode: str = "human"):
        self.profile = profile
        self.render_mode = render_mode
        self.source = SnapshotSource(TrackingSnapshot(timestamp=0.0))
        self.renderer = FieldStateRenderer(
            self.source,
            geometry=profile.geometry,
            rule_window=profile.display.rule_window,
        )
        self.canvas = PygameSurface(profile.geometry, window_size=profile.display.window_size)
        self.window_surface = None
        self.clock = None

    def step_replay(self, snapshot: TrackingSnapshot):
        self.source.update(snapshot)
        return self.render()

    def render(self):
        self.canvas.draw(self.renderer.render())

        if self.render_mode == "human":
            if self.window_surface is None:
                pygame.init()
                pygame.display.init()
                pygame.display.set_caption(f"Refbox overlay ({self.profile.profile_name})")
                self.window_surface = pygame.display.set_mode(self.profile.display.window_size)
            if self.clock is None:
                self.clock = pygame.time.Clock()

            self.window_surface.blit(self.canvas.surface, (0, 0))
            pygame.event.pump()
            pygame.display.update()
            self.clock.tick(self.profile.display.render_fps)
        elif self.render_mode == "rgb_array":
            return self.canvas.to_array()

    def close(self):
        if self.window_surface is not None:
            pygame.display.quit()
            pygame.quit()
            self.window_surface = None


def _load_replay(path) -> Generator[Union[ReplayMetadata, TrackingSnapshot], None, None]:
    """Generator that yields metadata and snapshots from a replay file."""
    with open(path, "rb") as f:
        # read metadata (first object)
        metadata = pickle.load(f)

        # yield metadata separately
        yield metadata

        # then yield frames
        while True:
            try:
                frame = pickle.load(f)
                yield frame
            except EOFError:
                break


def load_snapshots(path) -> tuple[Optional[ReplayMetadata], list[TrackingSnapshot]]:
    """Read a replay file, dropping anything that is not a ``TrackingSnapshot``."""
    frames = list(_load_replay(path))
    if not frames:
        return None, []

    metadata = frames[0]
    snapshots = []
    for frame in frames[1:]:  # skip metadata
        if not isinstance(frame, TrackingSnapshot):
            warnings.warn(f"Invalid frame in replay file (type: {type(frame).__name__}), skipping.")
            continue
        snapshots.append(frame)
    return metadata, snapshots


def play_replay(replay_path: Path, profile: ViewerProfile, play_by_play: bool = False):
    metadata, snapshots = load_snapshots(replay_path)
    if not snapshots:
        logger.warning("Replay file %s holds no frames", replay_path)
        return
    if metadata is not None and metadata.profile_name != profile.profile_name:
        logger.info("Replay was recorded with profile '%s'", metadata.profile_name)

    viewer = ReplayViewer(profile)
    frame_index = 0

    while frame_index < len(snapshots):
        viewer.step_replay(snapshots[frame_index])

        if play_by_play:
            print(f"Frame {frame_index + 1}/{len(snapshots)}: Press RIGHT/SPACE to advance, LEFT to go back.")
            waiting = True
            while waiting:
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        viewer.close()
                        return

                keys = pygame.key.get_pressed()
                step = 0

                # Forward step
                if keys[pygame.K_SPACE] or keys[pygame.K_RIGHT]:
                    step = 1
                # Backward step
                elif keys[pygame.K_LEFT]:
                    step = -1

                if step != 0:
                    frame_index = max(0, min(frame_index + step, len(snapshots) - 1))
                    waiting = False

                pygame.time.delay(10)
        else:
            frame_index += 1

    viewer.close()


def get_latest_replay(base_path: Path = REPLAY_BASE_PATH) -> Path:
    files = list(base_path.glob("*.pkl"))
    if not files:
        raise FileNotFoundError("No replay files found in the replay directory.")
    return max(files, key=lambda f: f.stat().st_mtime)


def resolve_replay(replay_file: Optional[str], base_path: Path = REPLAY_BASE_PATH) -> Path:
    """Accept a path, a replay name stored in ``base_path``, or nothing (latest replay)."""
    if not replay_file:
        latest = get_latest_replay(base_path)
        logger.info("No replay file specified. Using the latest replay: %s", latest.stem)
        return latest
    path = Path(replay_file)
    if path.is_file():
        return path
    candidate = base_path / f"{replay_file}.pkl"
    if candidate.is_file():
        return candidate
    raise FileNotFoundError(f"Replay '{replay_file}' not found as a file path or in {base_path}.")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Show the referee overlay for a recorded session.")
    parser.add_argument(
        "replay_file",
        nargs="?",
        help="Replay file path, or name (without extension) of a replay in the ./replays folder. "
        "Defaults to the newest replay.",
    )
    parser.add_argument(
        "-c",
        "--config",
        default="default",
        help="Viewer profile: built-in name or path to a YAML file.",
    )
    parser.add_argument(
        "-p",
        "--play-by-play",
        action="store_true",
        help="Render the replay one frame at a time for step-by-step playback.",
    )
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    configure_logging()
    logger.info("Entering application.")

    profile = load_profile(args.config)
    play_replay(resolve_replay(args.replay_file), profile, play_by_play=args.play_by_play)

    logger.info("Exit application")


if __name__ == "__main__":
    try:
        main()
    except KeyboardInterrupt:
        pass
