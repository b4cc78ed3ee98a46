"""
Location Agent Backend - package setup

FastAPI service resolving locations and estimating journeys for a
conversational location assistant.
"""

from setuptools import setup, find_namespace_packages


setup(
    name='location-agent-backend',
    version='1.0.0',
    author='Location Agent Team',
    description='Location lookup, distance and travel time estimates for a conversational assistant',
    long_description='''
    Resolves the caller's location by IP, geocodes free-text addresses
    through Nominatim and estimates straight-line distance, driving and
    walking time, a Google Maps link and safety tips between two places.
    ''',
    packages=find_namespace_packages(include=['app', 'app.*']),
    install_requires=[
        'fastapi>=0.110',
        'uvicorn>=0.27',
        'pydantic>=2.0',
        'python-dotenv>=1.0',
        'httpx>=0.27',
    ],
    extras_require={
        'test': [
            'pytest>=7.0',
            'pytest-mock>=3.10',
            'pytest-asyncio>=0.21',
        ],
    },
    zip_safe=False,
    python_requires='>=3.9',
    classifiers=[
        'Development Status :: 4 - Beta',
        'Intended Audience :: Developers',
        'Topic :: Scientific/Engineering :: GIS',
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3.9',
        'Programming Language :: Python :: 3.10',
        'Programming Language :: Python :: 3.11',
        'Programming Language :: Python :: 3.12',
    ],
)
