"""
Tests for transcode-prep.

Test suite covers:
- Timecode ranges, splices and their text encodings
- Crop insets and aspect-preserving scaling
- Provider registry and the provider contract
- Flask API endpoints and the command line interface
"""
