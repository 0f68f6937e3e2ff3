"""
Media transcode job preparation: source splicing and crop geometry.
"""
__version__ = '0.1.0'
