import os
import subprocess
import sys
from pathlib import Path

def main():
    """Build the application using PyInstaller"""
    project_root = Path(__file__).parent

    # Configuration
    app_name = "TodoApp"
    entry_point = "main.py"

    # Construct PyInstaller arguments
    # Use "PyInstaller" as module name
    args = [
        "PyInstaller",
        "--noconfirm",
        "--clean",
        "--windowed",  # No console window
        f"--name={app_name}",
    ]

    # Theme stylesheets are loaded as package data at runtime
    args.append("--collect-data=qdarktheme")

    # Collect all holidays submodules (fixes dynamic import issue)
    args.append("--collect-all=holidays")

    if os.name == 'nt':
        args.append("--exclude-module=AppKit")
        args.append("--exclude-module=Cocoa")
        args.append("--exclude-module=Foundation")

    # Entry point
    args.append(entry_point)

    print("=" * 50)
    print(f"Building {app_name}...")
    print(f"Command: {' '.join(args)}")
    print("=" * 50)

    try:
        # Check if pyinstaller is installed
        subprocess.run([sys.executable, "-m", "PyInstaller", "--version"], check=True, capture_output=True)

        # Run build
        subprocess.run([sys.executable, "-m"] + args, check=True)

        exe_name = app_name + (".exe" if os.name == 'nt' else "")
        print("\nBuild successful!")
        print(f"Executable is located at: {project_root / 'dist' / app_name / exe_name}")

    except subprocess.CalledProcessError as e:
        print(f"\nError: Build failed with exit code {e.returncode}")
        print("Ensure 'pyinstaller' is installed: pip install -e .[build]")
        sys.exit(1)
    except FileNotFoundError:
        print("\nError: PyInstaller not found.")
        print("Please install it: pip install -e .[build]")
        sys.exit(1)

if __name__ == "__main__":
    main()
