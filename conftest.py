"""
The test suite is plain unittest; run it with `python -m unittest discover tests`.
This file exists so that pytest, if you prefer it, also finds `ruledsl` and `example` from the project root.
"""
