"""Individual checks run against a hotpatch log."""
