# Copyright (c) 2009, Karoly Lorentey  <karoly@lorentey.hu>

"""File manipulation utilities."""

from contextlib import contextmanager

BUFSIZE = 128 * 1024

def xread(file, length):
    "Read exactly length bytes from file; raise EOFError if file ends sooner."
    data = file.read(length)
    if len(data) != length:
        raise EOFError
    return data

@contextmanager
def opened(filename, mode):
    "Open filename, or do nothing if filename is already an open file object"
    if isinstance(filename, str):
        file = open(filename, mode)
        try:
            yield file
        finally:
            if not file.closed:
                file.close()
    else:
        yield filename

def grow(file, size, offset):
    """Insert size bytes at offset in file, moving the rest of the file forward.

    The contents of the inserted region are unspecified; the caller is
    expected to overwrite it.  A file shorter than offset is extended
    with null bytes first.  Data is moved in chunks of at most BUFSIZE
    bytes, starting from the end of the file.
    """
    if size <= 0:
        raise ValueError("Size must be positive")
    if offset < 0:
        raise ValueError("Offset must not be negative")
    filesize = file.seek(0, 2)
    if offset > filesize:
        file.write(bytes(offset - filesize))
        filesize = offset
    file.write(bytes(size))
    end = filesize
    while end > offset:
        length = min(BUFSIZE, end - offset)
        file.seek(end - length)
        chunk = xread(file, length)
        file.seek(end - length + size)
        file.write(chunk)
        end -= length
    file.flush()

def shrink(file, size, offset):
    """Delete size bytes at offset from file, moving the rest of the file back.

    Data is moved in chunks of at most BUFSIZE bytes, starting from the
    beginning of the removed region.
    """
    if size <= 0:
        raise ValueError("Size must be positive")
    if offset < 0:
        raise ValueError("Offset must not be negative")
    filesize = file.seek(0, 2)
    remaining = filesize - offset - size
    if remaining < 0:
        raise ValueError("Region extends past end of file")
    src = offset + size
    dst = offset
    while remaining > 0:
        length = min(BUFSIZE, remaining)
        file.seek(src)
        chunk = xread(file, length)
        file.seek(dst)
        file.write(chunk)
        src += length
        dst += length
        remaining -= length
    file.truncate(filesize - size)
    file.flush()
