"""
Entry Point Script (Bootstrap)
==============================
Starts the stress domain demo straight from a source checkout.

Why is this file needed?
------------------------
It is located outside the 'src' package and adds 'src' to 'sys.path' so
'from stressdomain...' resolves without installing the package.

Usage:
    $ python run.py
"""
import sys
import os

current_dir: str = os.path.dirname(os.path.abspath(__file__))
src_path: str = os.path.join(current_dir, 'src')
sys.path.insert(0, src_path)

from stressdomain.main import main

if __name__ == "__main__":
    main()
