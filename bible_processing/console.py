from tqdm import tqdm


def log(msg: str):
    """Print a line without tearing any active progress bar."""
    tqdm.write(msg)
