# Copyright (c) 2017-2019, Stefan Grönke
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
"""Unit tests for listing jails and showing their parameters."""
import typing
import pytest

import jailinfo.errors
import jailinfo.JailInfo
import jailinfo.Options

Options = jailinfo.Options.Options


class TestList(object):

    def test_lists_all_jails(
        self,
        jail_command: typing.Any,
        logger: 'jailinfo.Logger.Logger',
        capsys: typing.Any
    ) -> None:
        options = Options.from_arguments(["list"])
        assert jailinfo.JailInfo.run(options, logger=logger) == 0
        out, _ = capsys.readouterr()
        assert out == "web\tdb\tmail\tdns\tproxy\n"

    def test_lists_selected_jails(
        self,
        jail_command: typing.Any,
        logger: 'jailinfo.Logger.Logger',
        capsys: typing.Any
    ) -> None:
        options = Options.from_arguments(["list", "db", "nonexistent"])
        assert jailinfo.JailInfo.run(options, logger=logger) == 0
        out, _ = capsys.readouterr()
        assert out == "db\n"

    def test_fails_when_no_jail_was_found(
        self,
        jail_command: typing.Any,
        logger: 'jailinfo.Logger.Logger',
        capsys: typing.Any
    ) -> None:
        options = Options.from_arguments(["list", "nonexistent"])
        assert jailinfo.JailInfo.run(options, logger=logger) == 1
        out, _ = capsys.readouterr()
        assert out == ""

    def test_fails_without_jails(
        self,
        jail_command: typing.Any,
        logger: 'jailinfo.Logger.Logger',
        capsys: typing.Any
    ) -> None:
        jail_command.stdout = b""
        options = Options.from_arguments(["list"])
        assert jailinfo.JailInfo.run(options, logger=logger) == 1


    def test_lists_jail_without_parameters(
        self,
        jail_command: typing.Any,
        logger: 'jailinfo.Logger.Logger',
        capsys: typing.Any
    ) -> None:
        jail_command.stdout = b"name=a\0\0\0name=b\0\0"
        options = Options.from_arguments(["list"])
        assert jailinfo.JailInfo.run(options, logger=logger) == 0
        out, _ = capsys.readouterr()
        assert out == "a\t\tb\n"


class TestShow(object):

    def test_shows_a_param_defined_in_one_of_five_jails(
        self,
        jail_command: typing.Any,
        logger: 'jailinfo.Logger.Logger',
        capsys: typing.Any
    ) -> None:
        options = Options.from_arguments(["all", "devfs_ruleset"])
        assert jailinfo.JailInfo.run(options, logger=logger) == 0
        out, err = capsys.readouterr()
        assert out.splitlines() == [
            "unset devfs_ruleset",
            "devfs_ruleset='7'",
            "unset devfs_ruleset",
            "unset devfs_ruleset",
            "unset devfs_ruleset"
        ]
        assert len(err.splitlines()) == 4
        for name in ["web", "mail", "dns", "proxy"]:
            assert name in err

    def test_fails_when_no_jail_defines_the_param(
        self,
        jail_command: typing.Any,
        logger: 'jailinfo.Logger.Logger',
        capsys: typing.Any
    ) -> None:
        options = Options.from_arguments(["all", "foobar"])
        assert jailinfo.JailInfo.run(options, logger=logger) == 1
        out, err = capsys.readouterr()
        assert out.splitlines() == ["unset foobar"] * 5
        assert len(err.splitlines()) == 5

    def test_param_without_value_is_defined(
        self,
        jail_command: typing.Any,
        logger: 'jailinfo.Logger.Logger',
        capsys: typing.Any
    ) -> None:
        options = Options.from_arguments(["mail", "mount.devfs"])
        assert jailinfo.JailInfo.run(options, logger=logger) == 0
        out, err = capsys.readouterr()
        assert out == "mount.devfs=''\n"
        assert err == ""

    def test_shows_all_params_of_one_jail(
        self,
        jail_command: typing.Any,
        logger: 'jailinfo.Logger.Logger',
        capsys: typing.Any
    ) -> None:
        options = Options.from_arguments(["dns", "all"])
        assert jailinfo.JailInfo.run(options, logger=logger) == 0
        out, _ = capsys.readouterr()
        assert out.splitlines() == [
            "name='dns'",
            "path='/jail/dns'",
            "exec.start='/bin/sh /etc/rc'"
        ]

    def test_values_only(
        self,
        jail_command: typing.Any,
        logger: 'jailinfo.Logger.Logger',
        capsys: typing.Any
    ) -> None:
        options = Options.from_arguments(
            ["all", "name", "devfs_ruleset", "path"],
            values_only=True
        )
        assert jailinfo.JailInfo.run(options, logger=logger) == 0
        out, _ = capsys.readouterr()
        assert out.splitlines() == [
            "'web' -- '/jail/web'",
            "'db' '7' '/jail/db'",
            "'mail' -- '/jail/mail'",
            "'dns' -- '/jail/dns'",
            "'proxy' -- '/jail/proxy'"
        ]

    def test_unknown_jail_is_skipped(
        self,
        jail_command: typing.Any,
        logger: 'jailinfo.Logger.Logger',
        capsys: typing.Any
    ) -> None:
        options = Options.from_arguments(["nonexistent", "name"])
        assert jailinfo.JailInfo.run(options, logger=logger) == 1
        out, err = capsys.readouterr()
        assert out == ""
        assert err == ""

    def test_second_jail_lacks_path(
        self,
        jail_command: typing.Any,
        logger: 'jailinfo.Logger.Logger',
        capsys: typing.Any
    ) -> None:
        jail_command.stdout = b"name=web\0path=/jail/web\0\0name=db\0\0"
        options = Options.from_arguments(["all", "name", "path"])
        assert jailinfo.JailInfo.run(options, logger=logger) == 0
        out, err = capsys.readouterr()
        assert out.splitlines() == [
            "name='web'",
            "path='/jail/web'",
            "name='db'",
            "unset path"
        ]
        assert "db" in err

    def test_command_failure_is_fatal(
        self,
        failing_jail_command: typing.Any,
        logger: 'jailinfo.Logger.Logger',
        capsys: typing.Any
    ) -> None:
        options = Options.from_arguments(["all"])
        with pytest.raises(jailinfo.errors.CommandFailure):
            jailinfo.JailInfo.run(options, logger=logger)
        out, _ = capsys.readouterr()
        assert out == ""

    def test_jail_without_parameters_reports_absent_params(
        self,
        jail_command: typing.Any,
        logger: 'jailinfo.Logger.Logger',
        capsys: typing.Any
    ) -> None:
        jail_command.stdout = b"name=a\0\0\0name=b\0\0"
        options = Options.from_arguments(["all", "name"])
        assert jailinfo.JailInfo.run(options, logger=logger) == 0
        out, err = capsys.readouterr()
        assert out.splitlines() == ["name='a'", "unset name", "name='b'"]
        assert len(err.splitlines()) == 1

    def test_jail_without_parameters_in_values_only_mode(
        self,
        jail_command: typing.Any,
        logger: 'jailinfo.Logger.Logger',
        capsys: typing.Any
    ) -> None:
        jail_command.stdout = b"name=a\0\0\0name=b\0\0"
        options = Options.from_arguments(["all", "name"], values_only=True)
        assert jailinfo.JailInfo.run(options, logger=logger) == 0
        out, _ = capsys.readouterr()
        assert out.splitlines() == ["'a'", "--", "'b'"]
