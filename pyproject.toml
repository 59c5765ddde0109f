[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ossim"
version = "0.1.0"
description = "Operating-systems teaching exercises: CPU scheduling, memory allocation, deadlock detection, a bounded buffer and small Unix utilities"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "operating systems",
    "scheduling",
    "round robin",
    "fcfs",
    "priority scheduling",
    "deadlock detection",
    "memory allocation",
    "first fit",
    "best fit",
    "worst fit",
    "producer consumer",
    "shared memory",
    "education",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Topic :: System :: Operating System",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
ossim-ls = "ossim.dirlist:main"
ossim-spaces = "ossim.spaces:main"
ossim-grep = "ossim.grep:main"
ossim-fork = "ossim.forkdemo:main"
ossim-shm = "ossim.sharedmem:main"
ossim-priority = "ossim.scheduling:priority_main"
ossim-rr = "ossim.scheduling:round_robin_main"
ossim-fcfs = "ossim.scheduling:fcfs_main"
ossim-prodcons = "ossim.prodcons:main"
ossim-deadlock = "ossim.deadlock:main"
ossim-worst-fit = "ossim.allocation:worst_fit_main"
ossim-first-fit = "ossim.allocation:first_fit_main"
ossim-best-fit = "ossim.allocation:best_fit_main"

[tool.hatch.build.targets.wheel]
packages = ["ossim"]

[tool.pytest.ini_options]
addopts = "-ra"
