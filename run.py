"""
Entry Point Script (Bootstrap)
==============================
Development runner that works without installing the package.

Why is this file needed?
------------------------
It lives outside the 'src' package and puts 'src' on 'sys.path', so
'from lifeprogress...' resolves from a plain checkout.

Usage:
    $ python run.py --birthday 1995-04-12
"""
import os
import sys

current_dir: str = os.path.dirname(os.path.abspath(__file__))
src_path: str = os.path.join(current_dir, 'src')
sys.path.insert(0, src_path)

# Own taskbar icon group on Windows
appid = 'lifeprogress.LifeProgress'
try:
    import ctypes
    ctypes.windll.shell32.SetCurrentProcessExplicitAppUserModelID(appid)
except (AttributeError, ImportError):
    # Not on Windows or ctypes not available
    pass

from lifeprogress.main import main

if __name__ == "__main__":
    sys.exit(main())
