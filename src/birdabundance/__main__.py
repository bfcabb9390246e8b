"""Run with: python -m birdabundance"""
import sys

from birdabundance.main import main

sys.exit(main())
