"""
End-to-end demo script to showcase the complete workflow.

Creates a sample photo folder with RAW/JPG pairs and orphans, scans it, and
moves the orphans to the to_delete folder.
"""

from pathlib import Path
from tempfile import TemporaryDirectory

from photo_orphans.core.catalog import CatalogBuilder
from photo_orphans.core.models import FilterMode, PhotoDirectory
from photo_orphans.core.resolver import OrphanResolver


def create_demo_photos(demo_dir: Path) -> None:
    """
    Create sample photo files for demonstration.

    Args:
        demo_dir: Directory to create files in
    """
    print(f"Creating demo photos in: {demo_dir}")

    # Complete pairs
    for name in ["DSCF0001", "DSCF0002", "DSCF0003"]:
        (demo_dir / f"{name}.RAF").write_bytes(b"raw sensor data")
        (demo_dir / f"{name}.JPG").write_bytes(b"developed image")

    # RAW files whose JPG was deleted while culling
    for name in ["DSCF0004", "DSCF0005"]:
        (demo_dir / f"{name}.RAF").write_bytes(b"raw sensor data")

    # JPG without RAW (shot in JPG-only mode)
    (demo_dir / "DSCF0006.JPG").write_bytes(b"developed image")

    # Unrelated file, never touched
    (demo_dir / "notes.txt").write_text("shoot notes")


def main() -> None:
    """Run the demo."""
    with TemporaryDirectory() as tmpdir:
        demo_dir = Path(tmpdir)
        create_demo_photos(demo_dir)

        photo_dir = PhotoDirectory(demo_dir, FilterMode.RAW)

        print("\n1. Building the catalog...")
        catalog = CatalogBuilder(photo_dir).build()
        print(f"   {len(catalog)} photos: {catalog.counts()}")

        resolver = OrphanResolver(photo_dir, show_progress=False)

        print("\n2. Orphans under the RAW filter:")
        for identity, _ in resolver.plan(catalog):
            print(f"   - {identity.name}")

        print("\n3. Moving orphans to the quarantine folder...")
        summary = resolver.resolve(catalog)
        for source, target in summary.relocated:
            print(f"   {source.name} -> {target}")

        print("\n4. Folder contents afterwards:")
        for path in sorted(demo_dir.iterdir()):
            print(f"   {path.name}{'/' if path.is_dir() else ''}")

        print(f"\nReview {summary.quarantine_dir} and delete it when satisfied.")


if __name__ == "__main__":
    main()
