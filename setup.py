#!/usr/bin/env python3
"""
inference-cache - AI 응답 캐시
Setup script for package installation
"""

from setuptools import setup, find_packages

# Read README file for long description
def read_file(filename):
    """Read file contents."""
    try:
        with open(filename, 'r', encoding='utf-8') as f:
            return f.read()
    except FileNotFoundError:
        return ""

# Read requirements from requirements.txt
def read_requirements():
    """Read requirements from requirements.txt."""
    requirements = []
    try:
        with open('requirements.txt', 'r', encoding='utf-8') as f:
            for line in f:
                line = line.strip()
                # Skip comments and empty lines
                if line and not line.startswith('#'):
                    requirements.append(line)
    except FileNotFoundError:
        pass
    return requirements

setup(
    name="inference-cache",
    version="1.0.0",
    author="Pigment Platform Team",
    description="AI 응답 캐시 - LRU + TTL + 바이트 예산 기반 upstream 추론 메모이제이션",
    long_description=read_file("README.md") or "LRU/TTL response cache and resilient caller for slow text-generation APIs",
    long_description_content_type="text/markdown",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    entry_points={
        "console_scripts": [
            "inference-cache=inference_cache.presentation.cli:main",
            "inference-cache-web=inference_cache.presentation.web.app:main",
        ],
    },
    install_requires=read_requirements(),
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "pytest-asyncio>=0.21.0",
            "black>=23.0.0",
            "ruff>=0.1.0",
        ],
    },
    python_requires=">=3.10",
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Framework :: FastAPI",
        "Topic :: Scientific/Engineering :: Artificial Intelligence",
        "Operating System :: OS Independent",
    ],
    keywords="ai, llm, cache, lru, ttl, retry, huggingface",
)
