"""Coherent noise kernels: lattice hashing, cellular, Perlin, value noise and domain warps."""