"""Animated scanline terrain drawn from smoothed white noise."""

from noisewave.config import CANVAS_HEIGHT, CANVAS_WIDTH, NoiseParams, WaveParams
from noisewave.core.convolve import convolve
from noisewave.core.kernel import build_gaussian_kernel, gaussian_vector, kernel_size_for
from noisewave.core.noise import generate_white_noise
from noisewave.core.normalize import normalize
from noisewave.core.waves import project_scanlines, render

__all__ = [
    "CANVAS_HEIGHT",
    "CANVAS_WIDTH",
    "NoiseParams",
    "WaveParams",
    "build_gaussian_kernel",
    "convolve",
    "gaussian_vector",
    "generate_white_noise",
    "kernel_size_for",
    "normalize",
    "project_scanlines",
    "render",
]
