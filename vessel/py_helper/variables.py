"""File and directory names shared by the scripts."""

CONFIG = "config.toml"
OUTPUT = "output"
TMP_SVG = "tmp.svg"
IMAGE_PREFIX = "vessel"
