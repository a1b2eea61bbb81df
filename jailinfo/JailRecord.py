# Copyright (c) 2017-2019, Stefan Grönke
# Copyright (c) 2014-2018, iocage
# All rights reserved.
#
# Redistribution and use in source and binary forms, with or without
# modification, are permitted providing that the following conditions
# are met:
# 1. Redistributions of source code must retain the above copyright
#    notice, this list of conditions and the following disclaimer.
# 2. Redistributions in binary form must reproduce the above copyright
#    notice, this list of conditions and the following disclaimer in the
#    documentation and/or other materials provided with the distribution.
#
# THIS SOFTWARE IS PROVIDED BY THE AUTHOR ``AS IS'' AND ANY EXPRESS OR
# IMPLIED WARRANTIES, INCLUDING, BUT NOT LIMITED TO, THE IMPLIED
# WARRANTIES OF MERCHANTABILITY AND FITNESS FOR A PARTICULAR PURPOSE
# ARE DISCLAIMED.  IN NO EVENT SHALL THE AUTHOR BE LIABLE FOR ANY
# DIRECT, INDIRECT, INCIDENTAL, SPECIAL, EXEMPLARY, OR CONSEQUENTIAL
# DAMAGES (INCLUDING, BUT NOT LIMITED TO, PROCUREMENT OF SUBSTITUTE GOODS
# OR SERVICES; LOSS OF USE, DATA, OR PROFITS; OR BUSINESS INTERRUPTION)
# HOWEVER CAUSED AND ON ANY THEORY OF LIABILITY, WHETHER IN CONTRACT,
# STRICT LIABILITY, OR TORT (INCLUDING NEGLIGENCE OR OTHERWISE) ARISING
# IN ANY WAY OUT OF THE USE OF THIS SOFTWARE, EVEN IF ADVISED OF THE
# POSSIBILITY OF SUCH DAMAGE.
"""Jail records read from the NUL-delimited output of jail -e."""
import typing

import jailinfo.helpers
import jailinfo.Logger
import jailinfo.Options


def split_records(data: bytes, encoding: str="UTF-8") -> typing.List[str]:
    """
    Split the raw jail command output into records.

    Every record is terminated by a NUL byte. Output without a trailing NUL
    still yields its last record.
    """
    text = data.decode(encoding, errors="replace")
    if text == "":
        return []
    records = text.split("\0")
    if records[-1] == "":
        records.pop()
    return records


class JailRecord(dict):
    """
    Parameters of a single jail.

    Parameters may be declared without a value, so the declaration order is
    kept in `keys_order` and a key listed there counts as defined even when
    its value is empty.
    """

    keys_order: typing.List[str]

    def __init__(
        self,
        data: typing.Optional[typing.Dict[str, str]]=None
    ) -> None:
        dict.__init__(self)
        self.keys_order = []
        if data is not None:
            self.update(data)

    def __setitem__(self, key: str, value: str) -> None:
        """Set a parameter and remember where it was first declared."""
        if key not in self.keys_order:
            self.keys_order.append(key)
        dict.__setitem__(self, key, value)

    def __delitem__(self, key: str) -> None:
        """Remove a parameter."""
        dict.__delitem__(self, key)
        self.keys_order.remove(key)

    def update(  # noqa: T484
        self,
        data: typing.Dict[str, str]
    ) -> None:
        """Set multiple parameters in the order of the input."""
        for key, value in data.items():
            self[key] = value

    def clear(self) -> None:
        """Remove all parameters and their declaration order."""
        dict.clear(self)
        self.keys_order.clear()

    def is_defined(self, key: str) -> bool:
        """Return True if the parameter was declared in this jail."""
        return key in self.keys_order

    @property
    def name(self) -> str:
        """Return the jail name or an empty string."""
        return str(self.get("name", ""))

    def set_record(self, text: str) -> None:
        """Parse a `key` or `key=value` record and store it."""
        key, _, value = text.partition("=")
        self[key] = value


class JailRecordStream(list):
    """Raw records of all jails, consumed from the head."""

    logger: typing.Optional['jailinfo.Logger.Logger']

    def __init__(
        self,
        records: typing.Optional[typing.Iterable[str]]=None,
        logger: typing.Optional['jailinfo.Logger.Logger']=None
    ) -> None:
        list.__init__(self, records if (records is not None) else [])
        self.logger = logger
        self._position = 0

    def pop_record(self, record: JailRecord) -> bool:
        """
        Pop the next jail off the stream into the given record.

        Records are consumed up to and including the next empty record.
        Returns False when the stream was already empty.
        """
        record.clear()

        consumed = 0
        for text in self:
            consumed += 1
            if self.logger is not None:
                self.logger.debug(f"{self._position:2d}:\t{text}")
            self._position += 1
            if text == "":
                break
            record.set_record(text)

        del self[:consumed]
        return consumed > 0

    def records(self) -> typing.Generator[JailRecord, None, None]:
        """Yield one fresh JailRecord per jail until the stream is empty."""
        while True:
            record = JailRecord()
            if self.pop_record(record) is False:
                return
            yield record


def query(
    options: 'jailinfo.Options.Options',
    logger: typing.Optional['jailinfo.Logger.Logger']=None
) -> JailRecordStream:
    """Run the jail command once and return the stream of its records."""
    stdout, _, _ = jailinfo.helpers.exec(
        options.jail_command_args,
        logger=logger,
        decode_stdout=False
    )
    records = split_records(
        typing.cast(bytes, stdout or b""),
        encoding=options.encoding
    )
    if logger is not None:
        logger.verbose(f"Read {len(records)} records from jail command")
    return JailRecordStream(records, logger=logger)
