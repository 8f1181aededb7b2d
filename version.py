"""
keeps bookfinder/version.py in sync with the latest git tag

"""

from __future__ import annotations

import os
import re
import subprocess

VERSION_LINE_MATCHER = re.compile(r"""^__version__\s*=\s*["']([^"']+)["']""", re.MULTILINE)
MAJOR_MINOR_PATCH_MATCHER = re.compile(r"^\d+\.\d+\.\d+$")


def pep440ify(git_describe_version: str) -> str:
    if not git_describe_version or MAJOR_MINOR_PATCH_MATCHER.match(git_describe_version):
        return git_describe_version
    parts = git_describe_version.split("-")
    if len(parts) == 3:
        version, _commits, sha = parts
        return f"{version}+{sha}"
    # bare sha from `git describe --always` without any tags
    return f"0.0.0+{git_describe_version}"


def read_version_file(version_file: str) -> str | None:
    try:
        with open(version_file, encoding="utf-8") as fp:
            match = VERSION_LINE_MATCHER.search(fp.read())
    except OSError:
        return None
    return match.group(1) if match else None


def get_project_version(version_file: str) -> str:
    version_file = os.path.join(os.path.dirname(os.path.realpath(__file__)), version_file)
    file_ver = read_version_file(version_file)

    try:
        proc = subprocess.run(["git", "describe", "--tags", "--always"], capture_output=True, check=False)
        stdout = proc.stdout if proc.returncode == 0 else b""
        if stdout:
            git_ver = pep440ify(stdout.splitlines()[0].strip().decode("utf-8"))
            if git_ver and git_ver != file_ver:
                with open(version_file, "w", encoding="utf-8") as fp:
                    fp.write('__version__ = "%s"\n' % git_ver)
                return git_ver
    except OSError:
        pass

    if not file_ver:
        raise Exception("version not available from git or from file %r" % version_file)

    return file_ver


if __name__ == "__main__":
    import sys

    get_project_version(sys.argv[1])
