def test_import_weakpoints_package() -> None:
    import importlib

    module = importlib.import_module("weakpoints")
    assert module is not None


def test_import_rng_no_side_effects() -> None:
    from weakpoints.core.rng import RNG

    rng = RNG(42)
    value = rng.randint(0, 1)
    assert value in (0, 1)
