import os
import tempfile

def ensure_outdir(outdir):
    os.makedirs(outdir, exist_ok=True)

def output_path_for(input_path, outdir=None):
    """
    people.csv -> people_output.csv, next to the input unless outdir is given.
    """
    folder, name = os.path.split(input_path)
    stem, ext = os.path.splitext(name)
    if ext.lower() != ".csv":
        stem, ext = name, ".csv"
    return os.path.join(outdir if outdir else folder, f"{stem}_output{ext}")

def write_outputs_people(df, path):
    """
    Write to a temp file in the target folder, then rename over `path`,
    so a failed write never leaves a half-written output behind.
    """
    folder = os.path.dirname(os.path.abspath(path))
    ensure_outdir(folder)
    fd, tmp_path = tempfile.mkstemp(dir=folder, prefix=".people_", suffix=".csv.tmp")
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="") as f:
            df.to_csv(f, index=False)
        os.replace(tmp_path, path)
    except BaseException:
        if os.path.exists(tmp_path):
            os.remove(tmp_path)
        raise
    return path
