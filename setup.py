#!/usr/bin/env python3

from setuptools import setup

setup(
    name="tagwright",
    version="0.1.0",
    author="Karoly Lorentey",
    author_email="karoly@lorentey.hu",
    packages=["tagwright"],
    license="BSD",
    description="ID3v1/ID3v2 tag reading and rewriting in pure Python 3",
    long_description="""
The ID3v2 tag format is notorious for its useless specification
documents and its quirky, mutually incompatible
part-implementations. Tagwright reads ID3v2.2, ID3v2.3 and ID3v2.4
tags, including the various badly formatted ones out there, converts
them to ID3v2.3 or ID3v2.4, and writes them back in place.
""",
    classifiers=[
        "Development Status :: 4 - Beta",
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: BSD License",
        "Operating System :: OS Independent",
        "Topic :: Multimedia :: Sound/Audio"
        ],
    )
