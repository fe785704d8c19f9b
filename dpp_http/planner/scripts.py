"""Programs run through ``python3 -c`` when native tools are missing.

Each script takes its paths from ``sys.argv`` so the plan never has to quote
paths into source code.
"""

# argv: archive, target directory
ZIP_EXTRACT = """\
import sys, zipfile
with zipfile.ZipFile(sys.argv[1]) as archive:
    archive.extractall(sys.argv[2])
"""

# argv: archive, target directory
TAR_EXTRACT = """\
import sys, tarfile
with tarfile.open(sys.argv[1]) as archive:
    if hasattr(tarfile, "data_filter"):
        archive.extractall(sys.argv[2], filter="data")
    else:
        archive.extractall(sys.argv[2])
"""

# argv: staging directory, destination
# A single top-level directory is unwrapped so its children land in the
# destination; otherwise every top-level entry is moved as is.
FLATTEN_MOVE = """\
import os, shutil, sys
src, dst = sys.argv[1], sys.argv[2]
entries = os.listdir(src)
if len(entries) == 1 and os.path.isdir(os.path.join(src, entries[0])):
    src = os.path.join(src, entries[0])
    entries = os.listdir(src)
os.makedirs(dst, exist_ok=True)
for name in entries:
    target = os.path.join(dst, name)
    if os.path.isdir(target) and not os.path.islink(target):
        shutil.rmtree(target)
    elif os.path.lexists(target):
        os.remove(target)
    shutil.move(os.path.join(src, name), target)
"""
