import pytest


def pytest_addoption(parser):
    parser.addoption(
        "--level",
        action="store",
        default="full",
        choices=["quick", "full"],
        help="Set the testing level: 'quick' or 'full'.",
    )


# These parameter names match up with the parameter names for
# test functions detected by pytest, and we test such functions with all
# values in the below sets. For example, a function with the parameter
# name team will be tested once for yellow and once for blue.
# The key type for this dictionary is a tuple which allows aliasing such
# that multiple parameter names share the same test value sets.
parameter_values = {
    ("team",): {  # Both colours even in quick mode
        "quick": [0, 1],
        "full": [0, 1],
    },
    ("robot_id",): {"quick": [0], "full": range(0, 12)},
    ("radius",): {"quick": [0, 1, 90, 500], "full": range(0, 701, 7)},
}


def pytest_generate_tests(metafunc):
    for param_set, cases in parameter_values.items():
        for param in param_set:
            if param in metafunc.fixturenames:
                metafunc.parametrize(param, cases[metafunc.config.getoption("level")])


@pytest.fixture
def pygame_offscreen(monkeypatch):
    """Initialise pygame against the dummy video driver and shut it down afterwards."""
    import pygame

    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    pygame.init()
    yield pygame
    pygame.quit()
