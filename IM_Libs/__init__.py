"""
IM_Libs - Image Manipulator Library Modules

This package contains the core functionality for the Image Manipulator project,
organized into specialized sub-packages:

- ImageEditingLib: Color models, the image buffer and the transformation engine
- NodesLib: Named executors for loading, filtering and saving images
"""

__version__ = "0.1.0"
