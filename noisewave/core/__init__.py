"""Core pipeline for the noise terrain demo.

Modules:
- noise: white noise source
- kernel: separable gaussian kernel builder
- convolve: border-renormalized 2D convolution
- normalize: min-max rescaling into [0, 1]
- waves: scanline projection + drawing
- animation: frame loop driving the renderer
"""
