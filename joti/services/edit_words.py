# Mots pour les codes d'édition générés
# Pas un secret crypto: juste facile à retenir/recopier

EDIT_WORDS = [
    "apple", "anchor", "arrow", "autumn", "badge", "bamboo", "banjo", "basil",
    "beacon", "birch", "bishop", "blossom", "bonfire", "breeze", "bridge", "bronze",
    "cactus", "candle", "canyon", "cargo", "carrot", "castle", "cedar", "cherry",
    "cinder", "clover", "cobalt", "comet", "copper", "coral", "cotton", "crane",
    "crystal", "dagger", "daisy", "delta", "desert", "dolphin", "dragon", "drift",
    "eagle", "ember", "falcon", "feather", "fern", "fiddle", "flint", "forest",
    "fossil", "galaxy", "garnet", "ginger", "glacier", "granite", "gravel", "harbor",
    "hazel", "helmet", "heron", "hollow", "honey", "island", "ivory", "jasmine",
    "jigsaw", "juniper", "kettle", "kiwi", "lantern", "lemon", "lilac", "lizard",
    "lotus", "magnet", "mango", "maple", "marble", "meadow", "meteor", "mint",
    "mirror", "monsoon", "mosaic", "nectar", "nutmeg", "oasis", "olive", "onyx",
    "orbit", "orchid", "otter", "paddle", "panda", "pebble", "pepper", "pillow",
    "pine", "planet", "plum", "pocket", "pollen", "prism", "puzzle", "quartz",
    "quill", "rabbit", "raven", "reef", "ribbon", "river", "rocket", "saffron",
    "salmon", "sapphire", "shadow", "shell", "silver", "sparrow", "spruce", "summit",
    "sunset", "thistle", "thunder", "tiger", "timber", "topaz", "tulip", "tundra",
    "velvet", "violet", "walnut", "willow", "winter", "zephyr",
]
