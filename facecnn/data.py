"""Conversion of raw face images into normalised arrays and loading them back."""

from __future__ import annotations

from pathlib import Path

import numpy as np
from PIL import Image

IMAGE_SIZE = 224
SPLITS = ("train", "valid", "test")
CLASS_MAP = (("non_autistic", 0), ("autistic", 1))
IMAGE_EXTENSIONS = (".jpg", ".png")
IMAGES_FILE = "images.npy"
LABELS_FILE = "labels.npy"

_RESIZABLE_MODES = {"L", "LA", "RGB", "RGBA"}

Split = tuple[np.ndarray, np.ndarray]


def _image_files(directory: Path) -> list[Path]:
    return sorted(path for path in directory.iterdir() if path.suffix in IMAGE_EXTENSIONS)


def _load_image(path: Path, image_size: int) -> np.ndarray:
    with Image.open(path) as img:
        img.load()
        if img.mode not in _RESIZABLE_MODES:
            img = img.convert("RGBA")
        resized = img.resize((image_size, image_size), Image.Resampling.BILINEAR)
        gray = resized.convert("L")
    return (np.asarray(gray, dtype=np.float32) / np.float32(255.0)).reshape(-1)


def preprocess_and_save(
    data_raw: Path, data_processed: Path, image_size: int = IMAGE_SIZE
) -> dict[str, int]:
    """Turn raw images into ``images.npy``/``labels.npy`` per split.

    Returns the number of images saved for each split that had any.
    """
    data_raw, data_processed = Path(data_raw), Path(data_processed)
    saved: dict[str, int] = {}
    for split in SPLITS:
        images: list[np.ndarray] = []
        labels: list[int] = []
        for class_name, label in CLASS_MAP:
            directory = data_raw / split / class_name
            if not directory.exists():
                print(f"Warning: directory {str(directory)!r} does not exist")
                continue
            for path in _image_files(directory):
                images.append(_load_image(path, image_size))
                labels.append(label)
        if not labels:
            print(f"No images found for split {split}")
            continue
        out_dir = data_processed / split
        out_dir.mkdir(parents=True, exist_ok=True)
        np.save(out_dir / IMAGES_FILE, np.stack(images).astype(np.float32))
        np.save(out_dir / LABELS_FILE, np.asarray(labels, dtype=np.uint32))
        print(f"Saved {len(labels)} images for split {split} to {str(out_dir)!r}")
        saved[split] = len(labels)
    return saved


def processed_data_exists(data_processed: Path) -> bool:
    """True when every split has both processed files."""
    data_processed = Path(data_processed)
    return all(
        (data_processed / split / IMAGES_FILE).exists()
        and (data_processed / split / LABELS_FILE).exists()
        for split in SPLITS
    )


def _load_split(directory: Path, split: str, image_size: int) -> Split:
    images_path = directory / IMAGES_FILE
    labels_path = directory / LABELS_FILE
    if not images_path.exists() or not labels_path.exists():
        raise FileNotFoundError(f"Missing processed data for split {split} in {str(directory)!r}")
    images = np.load(images_path, allow_pickle=False)
    labels = np.load(labels_path, allow_pickle=False)
    if images.dtype != np.float32 or images.ndim != 2:
        raise ValueError(f"{images_path} must hold a 2-D float32 array")
    if labels.dtype != np.uint32 or labels.ndim != 1:
        raise ValueError(f"{labels_path} must hold a 1-D uint32 array")
    expected = (labels.shape[0], image_size * image_size)
    if images.shape != expected:
        raise ValueError(f"images of split {split} have shape {images.shape}, expected {expected}")
    return images, labels


def load_processed(
    data_processed: Path, image_size: int = IMAGE_SIZE
) -> tuple[Split, Split, Split]:
    """Load the (images, labels) pairs of the train, valid and test splits."""
    data_processed = Path(data_processed)
    train, valid, test = (
        _load_split(data_processed / split, split, image_size) for split in SPLITS
    )
    return train, valid, test