"""CLI shim -- delegates to pdf_to_image.cli.main().

Usage:
    python pdf_to_images.py --vault ./notes convert
    python pdf_to_images.py --vault ./notes settings --format png
"""

from pdf_to_image.cli import main

if __name__ == "__main__":
    main()
