# facecnn

facecnn prepares grayscale face images for a two-class classifier, with
`non_autistic` as label 0 and `autistic` as label 1. It also gives you the
pieces around such a classifier: configuration from environment variables,
storage of named arrays in the safetensors format, and an AdamW optimiser for
NumPy arrays. It needs only NumPy and Pillow.

## Installation

```
pip install .
```

## Configuration: `facecnn.config`

`Config` is a dataclass with the fields `data_dir`, `models_dir`,
`learning_rate`, `epochs` and `model_type`. `Config.from_env(environ=None)`
reads them from `os.environ`, or from the mapping you pass in:

| Variable        | Default    | Field           |
|-----------------|------------|-----------------|
| `DATA_DIR`      | `./data`   | `data_dir`      |
| `MODELS_DIR`    | `./models` | `models_dir`    |
| `LEARNING_RATE` | `0.001`    | `learning_rate` |
| `EPOCHS`        | `10`       | `epochs`        |
| `MODEL_TYPE`    | `Cnn`      | `model_type`    |

If `LEARNING_RATE` is not a number, or `EPOCHS` is not a non-negative integer,
the default is used in its place.

`ensure_directories()` creates `data_dir`, `models_dir`, `data_dir/raw` and
`data_dir/processed`. `model_save_path(filename)` returns `models_dir / filename`.

## Preparing images: `facecnn.data`

Put the raw images (files ending in `.jpg` or `.png`) under a raw directory
laid out like this:

```
raw/train/non_autistic/...
raw/train/autistic/...
raw/valid/non_autistic/...
raw/valid/autistic/...
raw/test/non_autistic/...
raw/test/autistic/...
```

`preprocess_and_save(data_raw, data_processed, image_size=224)` goes through
the splits `train`, `valid` and `test`. It reads the image files of each class
in sorted order, resizes each image to `image_size`×`image_size` with bilinear
filtering, converts it to grayscale and scales the pixels to `[0, 1]`. For each
split that has images it writes `images.npy` (a float32 array of shape
`(n, image_size * image_size)`) and `labels.npy` (a uint32 array of shape
`(n,)`) to `data_processed/<split>/`. It prints a warning for a missing class
directory and a notice for a split with no images, and skips that split. It
returns a dict mapping each saved split to its number of images.

`processed_data_exists(data_processed)` is true when all three splits have
both files.

`load_processed(data_processed, image_size=224)` returns
`(train, valid, test)`, each an `(images, labels)` pair of arrays. It raises
`FileNotFoundError` when a split's files are missing and `ValueError` when an
array has the wrong dtype or shape.

```python
from facecnn.config import Config
from facecnn.data import load_processed, preprocess_and_save, processed_data_exists

config = Config.from_env()
config.ensure_directories()
processed = config.data_dir / "processed"
if not processed_data_exists(processed):
    preprocess_and_save(config.data_dir / "raw", processed)
(train_images, train_labels), valid, test = load_processed(processed)
```

## Storing weights: `facecnn.weights`

`save_tensors(path, tensors)` writes a mapping of names to NumPy arrays to a
safetensors file, with the names in sorted order. `load_tensors(path)` reads
every array back into a dict and ignores the `__metadata__` entry. The
supported dtypes are float64/32/16, int64/32/16/8, uint64/32/16/8 and bool.
Other dtypes, and malformed files, raise `ValueError`.

## Optimiser: `facecnn.optim`

`AdamW(params, lr=0.001, beta1=0.9, beta2=0.999, eps=1e-8, weight_decay=0.01)`
holds a mapping of names to parameter arrays. `step(grads)` takes a mapping of
names to gradients and updates the matching parameters in place with bias-
corrected Adam moments and decoupled weight decay. Parameters without a
gradient are left alone. A gradient for an unknown name raises `KeyError`, and
one with the wrong shape raises `ValueError`.

## What the package does not do

The package has no network model and no training loop, and it installs no
command. It prepares the data, reads the settings, stores weights and updates
parameters, but you have to supply the classifier itself, its forward and
backward passes, and the code that trains and evaluates it.