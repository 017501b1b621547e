import pytest

from disclosure.components.placement import Placement
from disclosure.components.tooltip_config import TooltipConfig, TooltipSize


def test_defaults():
    config = TooltipConfig()

    assert config.placement is Placement.TOP
    assert config.delay_ms == 100
    assert config.disabled is False
    assert config.offset == 12.0
    assert config.show_arrow is True
    assert config.size is TooltipSize.MD


def test_string_placement_and_size_are_normalised():
    config = TooltipConfig(placement="right", size="lg")

    assert config.placement is Placement.RIGHT
    assert config.size is TooltipSize.LG
    assert config.size.metrics["max_width"] == 300.0


@pytest.mark.parametrize(
    "kwargs",
    [
        {"delay_ms": -1},
        {"delay_ms": 1.5},
        {"delay_ms": True},
        {"placement": "middle"},
        {"placement": 3},
        {"offset": -0.5},
        {"offset": float("inf")},
        {"offset": "far"},
        {"size": "xl"},
        {"disabled": "no"},
        {"disabled": 1},
        {"show_arrow": None},
    ],
)
def test_invalid_configuration_fails_at_construction(kwargs):
    with pytest.raises(ValueError):
        TooltipConfig(**kwargs)


def test_zero_delay_is_allowed():
    assert TooltipConfig(delay_ms=0).delay_ms == 0
