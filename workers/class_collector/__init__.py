"""
class_collector: map Java sources to their compiled .class files.

Copies every class file (inner classes included) produced for a source
tree, plus the tree's non-Java resources, into one output directory and
reports the JDK release each class file targets.
"""

__version__ = "0.1.0"
COLLECTOR_VERSION = "v0"
PACKAGE_NAME = "class_collector"
SCHEMA_VERSION = "0.1"
