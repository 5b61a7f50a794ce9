"""
Schema module initialization.
Exports all schema classes from submodules for convenient imports.
"""
from .auth import *
from .faq import *
from .reservation import *
from .seed import *
from .tags import *
