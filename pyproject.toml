[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "potato"
version = "0.1.0"
description = "Helpers for a small BSP map renderer: VTX/VVD model readers, static prop lumps, displacement geometry, lightmap atlases, footstep and ambient sound logic, and reverb filters."
requires-python = ">=3.10"
dependencies = []
keywords = ["bsp", "vtx", "vvd", "static-props", "displacement", "lightmap", "glsl", "freeverb", "game-engine"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
    "Topic :: Multimedia :: Sound/Audio :: Sound Synthesis",
    "Topic :: Games/Entertainment :: First Person Shooters",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["potato"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
