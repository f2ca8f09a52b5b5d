"""Small tools: GCD command and web form, fractal renderers, regex replacement and demos."""

__version__ = "0.1.0"