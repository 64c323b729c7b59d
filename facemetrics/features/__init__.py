# SPDX-License-Identifier: Apache-2.0
from facemetrics.features.extractor import FeatureExtractor, extract
from facemetrics.features.sampling import sample_appearance, sample_color

__all__ = ["FeatureExtractor", "extract", "sample_appearance", "sample_color"]
