from dataclasses import dataclass


@dataclass(kw_only=True)
class ReplayMetadata:
    """Metadata for a recorded refbox session.

    Attributes:
        profile_name (str): Viewer profile the session was recorded with.
        number_of_teams (int): Teams in the tracking roster.
        number_of_ids (int): Robot ids per team in the tracking roster.
    """

    profile_name: str
    number_of_teams: int
    number_of_ids: int
