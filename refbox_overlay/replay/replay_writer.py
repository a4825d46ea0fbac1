import logging
import pickle
import warnings
from dataclasses import dataclass
from itertools import count
from pathlib import Path
from typing import IO, Optional

from refbox_overlay.config.settings import NUMBER_OF_IDS, NUMBER_OF_TEAMS, REPLAY_BASE_PATH
from refbox_overlay.data_sources.snapshot import TrackingSnapshot
from refbox_overlay.replay.entities import ReplayMetadata

logger = logging.getLogger(__name__)


@dataclass(kw_only=True)
class ReplayWriterConfig:
    """Configuration settings for initializing a ReplayWriter.

    Attributes:
        replay_name (str): The name of the replay file to be written.
        profile_name (str, optional): Viewer profile stored in the metadata. Defaults to "default".
        overwrite_existing (bool, optional): Whether to overwrite existing replay with same name. Defaults to False.
        base_path (Path, optional): Directory the replay is written to. Defaults to ./replays.
    """

    replay_name: str
    profile_name: str = "default"
    overwrite_existing: bool = False
    base_path: Path = REPLAY_BASE_PATH


class ReplayWriter:
    """Appends ``TrackingSnapshot`` frames to a pickle stream headed by ``ReplayMetadata``."""

    def __init__(self, replay_configs: ReplayWriterConfig):
        self.replay_configs = replay_configs
        self.path: Optional[Path] = None
        self.file: Optional[IO] = self.create_file(
            replay_configs=replay_configs,
            replay_metadata=ReplayMetadata(
                profile_name=replay_configs.profile_name,
                number_of_teams=NUMBER_OF_TEAMS,
                number_of_ids=NUMBER_OF_IDS,
            ),
        )

    def create_file(self, replay_configs: ReplayWriterConfig, replay_metadata: ReplayMetadata):
        base_path = replay_configs.base_path
        replay_path = base_path / f"{replay_configs.replay_name}.pkl"

        replay_path.parent.mkdir(parents=True, exist_ok=True)

        if replay_path.exists():
            if replay_configs.overwrite_existing:
                replay_path.write_bytes(b"")  # clear content
            else:
                for i in count(1):
                    candidate = base_path / f"{replay_configs.replay_name}_{i}.pkl"
                    if not candidate.exists():
                        replay_path = candidate
                        warnings.warn(f"Replay file already exists. Saving as {replay_path.name}")
                        break

        file = open(replay_path, "ab")
        try:
            pickle.dump(replay_metadata, file)
            file.flush()
        except (pickle.PicklingError, OSError) as e:
            logger.error("Failed to write replay metadata to file %s: %s", replay_path, e)
            file.close()
            return None
        self.path = replay_path
        return file

    def write_frame(self, snapshot: TrackingSnapshot):
        """Write a single tracking snapshot to the replay file."""
        if not self.file:
            logger.error("Replay file is not initialized.")
            return
        pickle.dump(snapshot, self.file)
        self.file.flush()

    def close(self):
        """Close the replay file."""
        if self.file:
            self.file.close()
            self.file = None
        else:
            logger.error("Replay file is not initialized.")

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        if self.file:
            self.close()
