# Tests for mediaprobe package
