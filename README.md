# potato

Pure-Python building blocks for a small BSP map renderer. The package parses
model strip and vertex files, reads static prop lumps, walks the BSP tree,
builds polygon and displacement geometry, packs lightmaps into a PNG atlas,
and handles the game-side logic for footsteps and ambient sounds. It also
provides the comb and allpass filters used in a Freeverb-style reverb. Every
function returns plain Python data (tuples, lists, dataclasses, bytes). You
can pass that data to any renderer or audio backend.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `potato.vtx` | `VTXFile.from_bytes` parses body parts, models, LODs, meshes, strip groups and strips (`Strip.is_trilist`, `Strip.is_tristrip`). |
| `potato.vvd` | `VVDFile.from_bytes` reads the checksum and per-LOD `Vertex` lists (position, normal, uv). It applies fixups when the file has them. |
| `potato.mdl_asset` | `companion_paths` gives the `.vvd` and `.dx90.vtx` paths for an `.mdl` path. `check_checksums` raises `ModelError` on a mismatch. `build_meshes` turns VTX strips and `MeshInfo` records into triangle-list `Mesh` objects. |
| `potato.source_bsp` | `parse_static_prop_lump` reads a static prop game lump into a `StaticPropLump`. `find_leaf` walks `Node`/`Plane` lists to a leaf index. `extract_base_texture` strips the `maps/<map>/` prefix and the coordinate suffixes from a material name. |
| `potato.bsp_mesh` | `find_normal`, `fan_indices`, `displacement_positions`, `displacement_triangle_order`. |
| `potato.texture_atlas` | `TextureAtlas.from_lightmaps` packs 128x128 RGB lightmaps into a square atlas. `to_png` and `save_png` write it as PNG. |
| `potato.prop_lighting` | `transform_matrix` builds a column-major 4x4 matrix from pitch/yaw/roll and an origin. `ambient_from_cube` decodes six RGB-exponent samples. |
| `potato.geometry` | `ray_box_intersection` and `generate_unique_colors`. |
| `potato.ambient` | `is_cluster_visible` tests a PVS bitset. `AmbientSound.update_visibility` reports when a looping sound should start or stop. |
| `potato.footsteps` | `FootstepPlayer.update` returns a `FootstepEvent` (surface, variant, pitch, pan) when a step should sound. `surface_from_flags` maps surface flags to a `Surface`. |
| `potato.shader` | `split_shader_source` and `load_shader_file` split a combined GLSL file at its `#shader vertex` / `#shader fragment` markers into `ShaderSources`. |
| `potato.filters` | `CombFilter`, `AllpassFilter`, `scaled_buffer_size` and the reverb tuning constants. |

## Examples

Load a model's strip and vertex data:

```python
from pathlib import Path

from potato.mdl_asset import MeshInfo, build_meshes, check_checksums, companion_paths
from potato.vtx import VTXFile
from potato.vvd import VVDFile

vvd_path, vtx_path = companion_paths("models/props/crate.mdl")
vvd = VVDFile.from_bytes(Path(vvd_path).read_bytes())
vtx = VTXFile.from_bytes(Path(vtx_path).read_bytes())

check_checksums(mdl_checksum, vtx, vvd)    # mdl_checksum comes from your own MDL reader
meshes = build_meshes(vtx, [MeshInfo(skinref_index=0, vertex_offset=0)])
vertices = vvd.lods[0].vertices
```

Clean up a map material name:

```python
from potato.source_bsp import extract_base_texture

extract_base_texture("maps/d1_canals_01a/concrete/wall_1_2_3")  # "concrete/wall"
```

Drive footstep sounds:

```python
import random

from potato.footsteps import SURF_WOOD, FootstepPlayer

steps = FootstepPlayer(random.Random(1))
event = steps.update(0.016, walking=True, surface_flags=SURF_WOOD)
if event is not None:
    print(event.sound_name, event.pitch, event.pan)   # e.g. "wood3"
```

Pack lightmaps into one atlas:

```python
from potato.texture_atlas import TextureAtlas

atlas = TextureAtlas.from_lightmaps(lightmaps)  # each lightmap holds 128x128 RGB bytes
atlas.save_png("lightmaps.png")
```

## What the package does not do

- It does not draw or play anything. It has no window, OpenGL calls, shader compilation or audio output.
- It does not read or decode texture files. It does not decode lightmap samples or allocate lightmap blocks, except for packing ready-made RGB lightmaps in `potato.texture_atlas`.
- It has no complete reverb effect. `potato.filters` provides only the comb and allpass stages and the tuning values for one.
- It has no full map-file loader. `potato.source_bsp` covers only static prop lumps, leaf lookup and material names.
- It has no MDL file parser. The caller supplies the MDL checksum and the per-mesh `MeshInfo`.
- It has no command-line program.