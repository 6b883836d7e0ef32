"""Gen III style battle building blocks: domain data, battle state, type chart, commands, hazards and RNG."""

__version__ = "0.1.0"
__all__ = ["domain", "rng", "state", "typechart", "commands", "hazards"]