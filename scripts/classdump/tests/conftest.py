"""Shared fixtures for class-dump formatter tests."""

import sys
import stat

import pytest


SAMPLE_DUMP = (
    "//\n"
    "//     Generated by class-dump 3.5 (64 bit).\n"
    "//\n"
    "//     class-dump is Copyright (C) 1997-1998, 2000-2001, 2004-2013 by Steve Nygard.\n"
    "//\n"
    "\n"
    "#pragma mark Named Structures\n"
    "\n"
    "struct CGPoint {\n"
    "    double x;\n"
    "    double y;\n"
    "};\n"
    "\n"
    "#pragma mark -\n"
    "\n"
    "//\n"
    "// File: /Applications/Example.app/Contents/MacOS/Example\n"
    "// UUID: 1A2B3C4D-0000-1111-2222-333344445555\n"
    "//\n"
    "//                           Arch: x86_64\n"
    "//                Source version: 0.0.0.0.0\n"
    "//            Minimum Mac OS X version: 10.10.0\n"
    "//                   SDK version: 10.11.0\n"
    "//\n"
    "// Objective-C Garbage Collection: Unsupported\n"
    "//\n"
    "//                     This file has 12 properties\n"
    "\n"
    "@protocol NSObject\n"
    "- (BOOL)isEqual:(id)arg1;\n"
    "@end\n"
    "\n"
    "@protocol ExampleDelegate <NSObject>\n"
    "- (void)exampleDidFinish:(id)arg1;\n"
    "@end\n"
    "\n"
    "@interface AppDelegate : NSObject <NSApplicationDelegate>\n"
    "{\n"
    "    NSWindow *_window;\n"
    "}\n"
    "\n"
    "@property(nonatomic) __weak NSWindow *window; // @synthesize window=_window;\n"
    "- (void)applicationDidFinishLaunching:(id)arg1;\n"
    "@end\n"
    "\n"
    "@interface NSString (ExampleAdditions)\n"
    "- (id)example_trimmed;\n"
    "@end\n"
    "\n"
)


@pytest.fixture
def sample_dump():
    """Realistic class-dump output with four declarations."""
    return SAMPLE_DUMP


@pytest.fixture
def fake_class_dump(tmp_path):
    """Create an executable that prints a file's bytes to stdout.

    Stands in for class-dump: the "Mach-O file" passed to it is a plain file
    holding the dump to print, then the script exits with ``exit_status``.
    """

    def _make(exit_status=0):
        script = tmp_path / "fake-class-dump"
        script.write_text(
            f"#!{sys.executable}\n"
            "import sys\n"
            "with open(sys.argv[1], 'rb') as f:\n"
            "    sys.stdout.buffer.write(f.read())\n"
            f"sys.exit({exit_status})\n"
        )
        script.chmod(script.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
        return script

    return _make


@pytest.fixture
def dump_file(tmp_path):
    """Write dump content (str or bytes) to a file and return its path."""

    def _write(content, name="Example"):
        path = tmp_path / name
        if isinstance(content, bytes):
            path.write_bytes(content)
        else:
            path.write_text(content, encoding="utf-8")
        return path

    return _write
