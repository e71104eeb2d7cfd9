from setuptools import setup

setup(
    name="ultimate-tictactoe-engine",
    version="0.1.0",
    description="Nested tic-tac-toe rules engine with four CPU difficulty tiers",
    packages=["game", "ai", "ai.baselines", "evaluation", "utils"],
    py_modules=["config"],
    python_requires=">=3.8",
    install_requires=[
        "numpy",
        "tqdm",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "tictactoe-ladder=evaluation.evaluator:main",
        ],
    },
)
