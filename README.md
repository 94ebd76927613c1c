# terrain

Building blocks for procedural 3D terrain in pure Python.

- `terrain.noise.lattice`: cellular (Worley), Perlin, cubic value and value
  noise in 2D and 3D.
- `terrain.noise.warp`: domain warp kernels that return a displacement for a
  position.
- `terrain.noise.hashing`: the lattice hash, gradient lookups and
  interpolation helpers the kernels are built on.
- `terrain.noise.options`: enumerations for noise settings.
- `terrain.objmodel`: a small Wavefront OBJ reader that produces interleaved
  vertex data.
- `terrain.camera`: a keyboard-driven `Camera` that produces view and
  projection matrices.
- `terrain.vecmath`: vector and matrix helpers (`look_at`, `perspective`,
  `translate`, ...).
- `terrain.clock`: `FrameClock`, a frame timer scaled to 60 fps.

## Installing

```
pip install .
```

The tests need the `test` extra:

```
pip install .[test]
pytest
```

## Noise kernels

Every kernel takes an integer seed and coordinates that you have already
scaled by the frequency you want. Results lie roughly in [-1, 1].

```python
from terrain.noise.lattice import cellular_2d, perlin_2d, perlin_3d, value_2d, value_cubic_3d
from terrain.noise.options import CellularDistanceFunction, CellularReturnType

seed = 1337
h = perlin_2d(seed, 12.0 * 0.01, 34.0 * 0.01)
v = value_2d(seed, 0.5, 0.25)
c = value_cubic_3d(seed, 0.5, 0.25, 1.75)

cell = cellular_2d(
    seed, 3.2, 4.7,
    CellularDistanceFunction.EUCLIDEAN_SQ,
    CellularReturnType.DISTANCE,
    1.0,  # jitter
)
```

`CellularDistanceFunction` selects Euclidean, squared Euclidean, Manhattan or
hybrid distances. `CellularReturnType` selects the cell value, the nearest or
second-nearest distance, or a sum, difference, product or ratio of the two.

The module `terrain.noise.options` also defines `NoiseType`, `FractalType`,
`RotationType3D` and `DomainWarpType`.

## Domain warping

Each warp function returns the displacement to add to the input point:

```python
from terrain.noise.warp import basic_grid_warp_2d, basic_grid_warp_3d

dx, dy = basic_grid_warp_2d(1337, 30.0, 0.01, 120.0, 45.0)
x, y = 120.0 + dx, 45.0 + dy
```

`simplex_gradient_warp_2d` and `opensimplex2_gradient_warp_3d` take the same
arguments plus `out_grad_only`; they expect the position to be skewed (2D) or
rotated (3D) onto the simplex lattice before the call.

## OBJ models

```python
from terrain.objmodel import load_obj, load_model

vertices, normals, faces = load_obj("mesh.obj")
model = load_model("mesh.obj")
```

The reader expects positions, then normals, then texture coordinates, then an
`s 0` line followed by quad faces written as `f v/t/n v/t/n v/t/n v/t/n`.
`parse_vertices`, `parse_normals`, `parse_faces` and `parse_obj` do the same
on a string.

`build_model` writes six floats into `Model.vertices` for every face corner:
position components 0, 2 and 1, each followed by the matching normal
component. `Model.indices` holds each corner's number within its face.
Malformed numbers or faces that refer to missing data raise `ValueError`.

## Camera

```python
from terrain.camera import Camera, Key
from terrain.clock import FrameClock

camera = Camera((1.0, 0.0, 0.0), (0.0, 0.0, 0.0))
clock = FrameClock()
dt = clock.tick(0.016)
camera.update({Key.W, Key.H}, dt)
view, projection = camera.view, camera.perspective
```

`H`/`L` turn, `J`/`K` tilt down and up, `W`/`S` move forward and back, `A`/`D`
strafe, and `Q`/`E` rise and sink. Matrices are 4x4 numpy arrays that act on
column vectors.

## What this package does not do

- It has no simplex (OpenSimplex2 / OpenSimplex2S) noise kernels, and no
  configurable generator object that applies frequency, fractal layering
  (FBm, ridged, ping-pong) or warp settings for you. The enumerations for
  those settings exist, but you call the kernels above directly.
- It does not build terrain meshes from noise heights.
- It opens no window and renders nothing: there are no shaders, GPU buffers
  or input polling. The camera consumes a set of `Key` values you supply, and
  the model and matrices are plain data for you to hand to a renderer.