"""Smoke test to verify the toolchain works."""


def test_import_corona_defense():
    """Verify the corona_defense package can be imported."""
    import corona_defense

    assert corona_defense is not None


def test_subpackages_importable():
    """Verify all subpackages can be imported."""
    import corona_defense.lobby
    import corona_defense.stage
    import corona_defense.web.app

    assert corona_defense.stage is not None
    assert corona_defense.lobby is not None
    assert corona_defense.web.app.app is not None
