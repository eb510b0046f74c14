"""
Setup script for Podcast Downloader package.
"""

from setuptools import setup, find_packages

setup(
    name='podcast-downloader',
    version='0.1.0',
    description='Download podcast episodes from RSS feeds',
    packages=find_packages(exclude=['tests', 'tests.*']),
    install_requires=[
        'feedparser',
        'requests',
        'tqdm',  # For progress bars
        'questionary',  # For the episode selection menu
    ],
    extras_require={
        'test': [
            'pytest',
        ],
    },
    python_requires='>=3.8',
    entry_points={
        'console_scripts': [
            'podcast-downloader=podcast_downloader.cli:main',
        ],
    },
)
