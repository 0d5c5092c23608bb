# torusworld

Procedural terrain on a torus. The package provides coherent noise and
fractal Brownian motion, binary heightmap storage, two camera controllers,
and triangle meshes for a heightmapped torus, either curved or unrolled flat.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

### `torusworld.value_noise`

Value noise from a sine hash. `hash3(x, y, z)` and `hash4(x, y, z, w)` return a
pseudorandom value in `[0, 1)`. `noise3d` and `noise4d` blend the hashed
lattice values with a Hermite curve and return smooth noise in `[0, 1]`.

### `torusworld.perlin`

`Perlin(seed)` shuffles a 256-entry permutation table from the seed. The
table is exposed as `Perlin.permutation`. The methods `noise2d`, `noise3d` and
`noise4d` return gradient noise roughly in `[-1, 1]`. The gradient helpers
`grad3d(hash_value, x, y, z)` and `grad4d(hash_value, x, y, z, w)` are public.

### `torusworld.simplex`

`simplex3d` and `simplex4d` return simplex noise roughly in `[-1, 1]`. Both
use a fixed permutation table.

### `torusworld.fbm`

`fbm3d(x, y, z, octaves, lacunarity, gain, noise)` and
`fbm4d(x, y, z, w, octaves, lacunarity, gain, noise)` sum `octaves` layers of
any noise function and map the result from `[-1, 1]` to `[0, 1]`. They raise
`ValueError` when `octaves` is less than 1.

`NoiseType` has the members `VALUE`, `PERLIN` and `SIMPLEX`.
`noise_function_4d(noise_type, seed=42)` returns the matching 4D function.
The seed is used only for Perlin noise.

### `torusworld.storage`

A matrix file holds two little-endian 32-bit integers, the row count and then
the column count. The values follow as little-endian float32 in row order.

- `save_matrix(path, matrix)` writes a 2D array. It raises `ValueError` if the
  array is not two-dimensional.
- `load_matrix(path)` returns a float32 NumPy array. It raises `ValueError`
  if the header or the data is truncated, or if a dimension is negative.

Heightmaps are cached under `resources/heightmaps` (`RESOURCES_DIR`,
`HEIGHTMAPS_DIR`) below a root directory, which defaults to `"."`:

- `heightmap_path(filename, root)` returns the path of a cached heightmap.
- `heightmap_exists(filename, root)` tells whether that file exists.
- `save_heightmap(filename, heightmap, root)` creates the folders as needed,
  writes the file and returns its path.
- `build_fullpath(folder1, folder2, filename)` joins three parts with the
  platform separator.

### `torusworld.camera`

`Camera` is a dataclass holding `position`, `target` and `up`, which are
NumPy vectors, and `fovy`. Input is passed as plain arguments, not read from
a device:

- `OrbitCamera.update(camera, wheel, rotating, panning, mouse_delta)` handles
  zoom, orbit and pan:
  - The wheel zooms, with a minimum distance of `min_distance`.
  - While `rotating`, the mouse delta turns yaw and pitch. Pitch is clamped
    just short of straight up or down.
  - While `panning`, the mouse delta moves the target.
- `FollowCamera.set_car_position(position)` records the point to follow.
- `FollowCamera.update(camera, reset, rotating, panning, mouse_delta)` eases
  the camera position towards that point by `lerp` each frame. It aims just
  above the point, offset by a pannable `deviation`, and `reset` clears the
  deviation.

Both `update` methods change `camera` in place and also return it.

### `torusworld.torus`

`Torus(major, minor, width, height)` describes a torus whose surface maps
onto a heightmap of `height` rows and `width` columns.

- `theta(u)` and `phi(v)` convert map coordinates to angles.
- `position`, `normal`, `theta_tangent` and `phi_tangent` each take a map
  point `(u, v)` and return a NumPy vector.
- `frame(u, v)` returns a `TorusFrame`. The frame holds the precomputed sines
  and cosines and offers the same four vectors as properties.

Heightmaps:

- `generate_heightmap(torus, noise_type=NoiseType.PERLIN, seed=42, scale=0.005)`
  samples domain-warped 4D fBm (6 octaves) around both circles of the torus,
  so the map wraps seamlessly. It raises the values to the fourth power for
  contrast and returns a float32 array of shape `(height, width)` in `[0, 1]`.
- `get_heightmap(torus, filename="heightmap.bin", root=".")` loads the cached
  map if it exists. It raises `ValueError` if the cached map's shape does not
  match the torus. If no cached map exists, it generates one and stores it in
  the cache.
- `write_pgm(path, heightmap)` writes a binary greyscale (P5) PGM image. The
  values must lie in `[0, 1]`.

Meshes:

- `build_torus_mesh(torus, heightmap, rings, sides)` builds a closed torus
  whose surface is pushed outward along its normals by up to 400 units.
- `build_flat_torus_mesh(torus, heightmap, rings, sides)` unrolls the surface
  onto the x-z plane, with heights of up to 50 units along y. Its triangles
  do not wrap around the edges.

Both mesh builders return a `Mesh` with `vertices`, `normals`, `texcoords`
and 16-bit `indices`, plus the properties `vertex_count` and
`triangle_count`. They raise `ValueError` in these cases:

- `rings * sides` exceeds 65536.
- The heightmap's shape does not match the torus.
- The heightmap's values leave `[0, 1]`.
- The heightmap is flat.

## Example

```python
from torusworld.fbm import NoiseType, fbm4d, noise_function_4d
from torusworld.perlin import Perlin

perlin = Perlin(42)
height = fbm4d(0.1, 0.2, 0.3, 0.4, 6, 2.0, 0.5, perlin.noise4d)
assert 0.0 <= height <= 1.0

noise = noise_function_4d(NoiseType.SIMPLEX)
print(noise(0.5, 0.5, 0.5, 0.5))
```

Terrain for a small torus:

```python
import math
from torusworld.torus import Torus, get_heightmap, write_pgm, build_flat_torus_mesh

width, height = 80, 60
torus = Torus(width / (2 * math.pi), height / (2 * math.pi), width, height)
heightmap = get_heightmap(torus, "heightmap.bin", ".")
write_pgm("heightmap.pgm", heightmap)
mesh = build_flat_torus_mesh(torus, heightmap, 64, 32)
print(mesh.vertex_count, mesh.triangle_count)
```

Heightmap generation runs in pure Python, so large maps take a long time.
The cache means this cost is paid only once.

## What the package does not do

The package computes data only:

- It opens no window and renders nothing. Meshes are returned as arrays for
  you to draw with a library of your choice.
- It runs no physics simulation, vehicle model or collision handling.
- It plays no sound.
- It has no command-line program.