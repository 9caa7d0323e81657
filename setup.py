from setuptools import setup, find_packages

setup(
    name='LegacyScore',
    version='0.1',
    packages=find_packages(exclude=['tests']),
    package_data={'LegacyScore': ['config.json', 'logging.json']},
    license='MIT',
    description='Simulation of osu! ScoreV1 totals for re-scaling legacy scores',
    classifiers=[
        'Development Status :: 3 - Alpha',
        'License :: OSI Approved :: MIT License',
        'Natural Language :: English',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3 :: Only',
        'Topic :: Games/Entertainment',
    ],
    install_requires=['slider', 'python-box', 'colorama'],
    extras_require={
        'test': ['pytest'],
    },
    python_requires=">=3.6",
)
