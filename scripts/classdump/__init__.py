"""class-dump formatter - split class-dump output into one header per declaration.

This package provides tools for:
- Running class-dump against a Mach-O binary
- Extracting the shared class-dump comment header
- Segmenting the dump into @protocol/@interface ... @end blocks
- Naming each block and writing it to <name>.h

Usage:
    python -m scripts.classdump <class-dump executable> <Mach-O file> <output directory>

From Python, format_dump/format_binary (scripts.classdump.formatter) accept a
FormatterConfig, which scripts.classdump.config.load_config reads from YAML.
"""

__version__ = "1.0.0"
