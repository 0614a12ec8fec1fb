"""Built-in sample inputs."""

from __future__ import annotations

DEMO_TEXT = """The particle has a mass of 5.0 kg and a volume of 0.5 m3.
The circle has a radius of 12 cm.
The video clip has a frame rate of 60 fps and a duration of 10 seconds.
The system temperature is 300 Kelvin.
The network transmits at a frequency of 2.4 GHz."""
