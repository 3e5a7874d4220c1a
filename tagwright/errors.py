# Copyright (c) 2009, Karoly Lorentey  <karoly@lorentey.hu>

class Error(Exception): pass

class Warning(Error, UserWarning): pass

class FrameWarning(Warning): pass
class ErrorFrameWarning(FrameWarning): pass
class LeftoverDataWarning(FrameWarning): pass
class DuplicateFrameWarning(FrameWarning): pass

class NoHeaderError(Error, ValueError): pass
class HeaderError(Error, ValueError): pass
class UnsupportedVersionError(Error, NotImplementedError): pass
class EncryptionUnsupportedError(Error, NotImplementedError): pass
class BadUnsynchData(Error, ValueError): pass
class BadCompressedData(Error, ValueError): pass
class JunkFrameError(Error, ValueError): pass

class ValueTooWide(Error, ValueError): pass
class InvalidSyncSequence(Error, ValueError): pass
class TruncatedSyncSequence(Error, ValueError): pass
