"""
Builds list-big-files into a single console executable
"""
import os
import shutil
import subprocess
import sys

NAME = 'list-big-files'

def exe_path():
    suffix = '.exe' if sys.platform.startswith('win') else ''
    return os.path.join('dist', NAME + suffix)

def build():
    print("Cleaning old builds...")
    for folder in ['build', 'dist']:
        if os.path.exists(folder):
            shutil.rmtree(folder)

    print("Building executable...")

    cmd = [
        'pyinstaller',
        '--onefile',
        '--console',
        '--name', NAME,
        '--hidden-import', 'psutil',
        '--hidden-import', 'pydantic',
        '--hidden-import', 'dotenv',
        'main.py'
    ]

    result = subprocess.run(cmd, capture_output=True, text=True)

    if result.returncode != 0:
        print("Build failed:")
        print(result.stderr)
        sys.exit(1)

    exe = exe_path()
    print("Build successful!")
    print("")
    print("Usage:")
    print(f"  {exe} [directory] [min_size]")
    print("")
    print("Examples:")
    print(f"  {exe} .")
    print(f"  {exe} /Users/username 50")
    print("")
    print(f"Running: {exe} . 10")
    subprocess.run([exe, '.', '10'])

if __name__ == '__main__':
    build()
