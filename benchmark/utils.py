# Copyright 2026 BrainX Ecosystem Limited. All Rights Reserved.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
# ==============================================================================

# -*- coding: utf-8 -*-

import time

import matplotlib.pyplot as plt
import numpy as np


def best_time(fn, n_warmup=2, n_runs=5):
    """Return the fastest of ``n_runs`` timed calls, after ``n_warmup`` untimed ones."""
    for _ in range(n_warmup):
        fn()
    times = []
    for _ in range(n_runs):
        start = time.perf_counter()
        fn()
        times.append(time.perf_counter() - start)
    return min(times)


def visualize(
    results,
    title='Throughput Ratio (sfcrand / numpy)',
    filename=None
):
    labels = list(results.keys())
    ratio = list(results.values())

    x = np.arange(len(labels))
    width = 0.35

    fig, ax = plt.subplots()
    bars = ax.bar(x, ratio, width, label='Ratio')

    ax.set_xlabel('Operation')
    ax.set_ylabel('Throughput Ratio')
    ax.set_title(title)
    ax.set_xticks(x)
    ax.set_xticklabels(labels, rotation=45, ha='right')
    ax.axhline(1.0, color='gray', linestyle='--', linewidth=1)

    for bar in bars:
        height = bar.get_height()
        ax.annotate(
            f'{height:.2f}',
            xy=(bar.get_x() + bar.get_width() / 2, height),
            xytext=(0, 3),
            textcoords="offset points",
            ha='center',
            va='bottom'
        )

    fig.tight_layout()
    if filename is not None:
        plt.savefig(filename)
    plt.show()
