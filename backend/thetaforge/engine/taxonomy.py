"""Property taxonomy — category name → ordered tuple of known property names.

Iteration order matters: a segment's "first label" (used by the logic fallback
and by cross-category pairing) is the first match in this order.
"""

from __future__ import annotations

TAXONOMY: dict[str, tuple[str, ...]] = {
    "numerical": (
        "angle", "length", "width", "height", "area", "volume", "radius", "diameter",
        "circumference", "perimeter", "density", "velocity", "acceleration", "frequency",
        "wavelength", "amplitude", "pixel count", "resolution", "coordinate", "scale factor",
    ),
    "computer_file": (
        "file name", "file type", "extension", "size on disk", "creation date",
        "modification date", "access date", "owner", "permissions", "attributes",
        "version number", "compatibility mode", "security settings", "checksum", "location",
        "path", "compression status", "archive bit", "digital signature", "author", "title",
        "comments",
    ),
    "text": (
        "font family", "font size", "font weight", "font style", "color", "alignment",
        "line spacing", "letter spacing", "word spacing", "rotation angle", "opacity",
        "shadow offset", "border style", "margin", "padding", "encoding", "language", "case",
        "hyphenation", "ligatures",
    ),
    "material": (
        "state", "mass", "density", "volume", "energy", "temperature", "melting point",
        "boiling point", "hardness", "tensile strength", "conductivity", "malleability",
        "ductility", "brittleness", "viscosity", "elasticity", "refractive index",
        "specific heat capacity", "ph level", "solubility",
    ),
    "video": (
        "frame rate", "fps", "resolution", "duration", "bitrate", "codec", "aspect ratio",
        "pixel depth", "audio channels", "sample rate", "audio bitrate", "subtitle language",
        "keyframe interval", "color space", "compression type", "file format", "metadata tags",
        "brightness", "contrast", "saturation", "timestamp",
    ),
    "geometry": (
        "vertices", "edges", "faces", "centroid", "apothem", "inradius", "circumradius",
        "symmetry", "tessellation", "fractal dimension",
    ),
    "image": (
        "bit depth", "color mode", "contrast ratio", "histogram", "file format", "exif data",
        "gamma", "noise level", "sharpening radius", "layer blend mode", "opacity",
    ),
    "audio": (
        "sample rate", "bit rate", "channels", "dynamic range", "frequency response", "pitch",
        "tempo", "reverb time", "waveform shape", "compression ratio", "amplitude",
    ),
    "software": (
        "class name", "id", "visibility", "inheritance", "mutability", "scope",
        "default value", "event handlers", "thread safety", "serialization",
    ),
    "biological": (
        "genus", "species", "habitat", "lifespan", "genome size", "metabolic rate",
        "reproductive strategy", "body symmetry", "cell type", "enzyme activity",
        "toxicity level", "trophic level", "photosynthetic efficiency", "mutation rate",
        "biodiversity index", "osmoregulation", "allele frequency", "endangerment status",
        "biomass", "hormone receptor density", "ecological niche",
    ),
    "physics": (
        "force", "mass", "acceleration", "velocity", "time", "distance", "energy", "kinetic",
        "potential", "frequency", "amplitude", "wavelength", "momentum", "impulse",
    ),
    "chemistry": (
        "atomic number", "atomic mass", "electron configuration", "bond type",
        "electronegativity", "polarity", "reaction rate", "temperature", "activation energy",
        "ph", "concentration", "equilibrium constant", "oxidation state", "redox potential",
    ),
    "environmental": (
        "temperature", "humidity", "dew point", "biodiversity index", "habitat fragmentation",
        "species richness", "carbon footprint", "energy consumption", "emission factor",
        "soil ph", "nutrient availability", "plant growth rate", "pollution level",
        "bioaccumulation",
    ),
}
