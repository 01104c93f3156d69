from setuptools import find_packages, setup


setup(
    name="markov_mc",
    version="1.0.0",
    description="Monte-Carlo estimation of discrete and continuous-time Markov chain probabilities",
    packages=find_packages(include=["MCMC", "MCMC.*"]),
    python_requires=">=3.9",
    install_requires=[
        "numpy",
        "numba",
        "joblib",
        "tqdm",
    ],
    extras_require={
        "test": ["pytest", "scipy"],
    },
    entry_points={
        "console_scripts": [
            "markov-mc=MCMC.run_examples:main",
        ],
    },
)
