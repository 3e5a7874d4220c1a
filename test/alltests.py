# Copyright (c) 2009, Karoly Lorentey  <karoly@lorentey.hu>

import unittest

import test_fileutil
import test_conversion
import test_specs
import test_frames
import test_tag
import test_id3v1

suite = unittest.TestSuite()
suite.addTest(test_fileutil.suite)
suite.addTest(test_conversion.suite)
suite.addTest(test_specs.suite)
suite.addTest(test_frames.suite)
suite.addTest(test_tag.suite)
suite.addTest(test_id3v1.suite)

if __name__ == "__main__":
    unittest.main(defaultTest="suite")
