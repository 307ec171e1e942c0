"""
Default data files for NodeBar
"""
import os

# Path to package data directory
DATA_DIR = os.path.dirname(os.path.abspath(__file__))

# Sample nodes shown by the preview rendering
PREVIEW_NODES = os.path.join(DATA_DIR, 'preview_nodes.tsv')

# Progress used together with the preview nodes
PREVIEW_PROGRESS = 2
