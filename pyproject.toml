[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "minitools"
version = "0.1.0"
description = "Small command-line utilities: file tools, ciphers, a tiny stack VM, an ELF reader, a scheduler, file transfer and more."
requires-python = ">=3.10"
keywords = [
    "utilities",
    "cli",
    "hexdump",
    "cipher",
    "elf",
    "scheduler",
    "file-transfer",
    "text-editor",
    "stack-machine",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Environment :: Console :: Curses",
    "Intended Audience :: Developers",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
]
dependencies = [
    "watchdog",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
mt-bank = "minitools.bank:main"
mt-circle = "minitools.geometry:circle_main"
mt-rectangle = "minitools.geometry:rectangle_main"
mt-temperature = "minitools.geometry:temperature_main"
mt-encryptor = "minitools.ciphers:main"
mt-rot13 = "minitools.ciphers:rot13_main"
mt-tinyvm = "minitools.tinyvm:main"
mt-factorial = "minitools.mathutils:factorial_main"
mt-vowels = "minitools.textutils:vowel_main"
mt-histgrep = "minitools.textutils:histgrep_main"
mt-cat = "minitools.files:cat_main"
mt-head = "minitools.files:head_main"
mt-linecount = "minitools.files:linecount_main"
mt-filesize = "minitools.files:filesize_main"
mt-listdir = "minitools.files:listdir_main"
mt-copy = "minitools.files:copy_main"
mt-tee = "minitools.files:tee_main"
mt-icat = "minitools.files:icat_main"
mt-showhex = "minitools.hexdump:main"
mt-envdump = "minitools.sysinfo:envdump_main"
mt-uptime = "minitools.sysinfo:uptime_main"
mt-time = "minitools.sysinfo:time_main"
mt-elfread = "minitools.elf:main"
mt-dirhash = "minitools.dirhash:main"
mt-scheduler = "minitools.scheduler:main"
mt-microshell = "minitools.microshell:main"
mt-send = "minitools.transfer:send_main"
mt-recv = "minitools.transfer:recv_main"
mt-watch = "minitools.watcher:main"
mt-onan = "minitools.editor:main"
mt-typelogger = "minitools.typelogger:main"
mt-httpget = "minitools.httpget:main"
mt-ping = "minitools.ping:main"

[tool.hatch.build.targets.wheel]
packages = ["minitools"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
