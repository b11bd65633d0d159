# app/catalog.py
from __future__ import annotations
from typing import Tuple

# -------- Short words (general category, 1..6 chars) --------
WORDS: Tuple[str, ...] = (
    "apple", "green", "river", "monkey", "blue", "fast", "water", "light",
    "happy", "quiet", "small", "warm", "black", "white", "brown", "pink",
    "paper", "chair", "table", "phone", "music", "dance", "think", "learn",
    "teach", "write", "speak", "watch", "build", "start", "finish", "begin",
    "close", "open", "clean", "dirty", "fresh", "sweet", "sharp", "smooth",
    "rough", "quick", "slow", "early", "late", "young", "old", "new",
    "right", "left", "front", "back", "above", "below", "under", "over",
    "after", "before", "today", "night", "week", "month", "king", "queen",
    "peace", "brave", "smart", "funny", "kind", "calm", "clear", "cloud",
    "earth", "wind", "ocean", "beach", "island", "forest", "valley", "stream",
    "pond", "lake", "ship", "boat", "sail", "crew", "map", "path",
    "road", "trail", "track", "train", "bus", "stop", "driver", "seat",
    "window", "flight", "pilot", "city", "town", "street", "corner", "sign",
    "shop", "store", "market", "buyer", "cash", "price", "sale", "offer",
    "deal", "brand", "model", "choice", "select", "pick", "need", "want",
    "buy", "order", "mail", "box", "crate", "plant", "tool", "gear",
    "bed", "pillow", "sheet", "cover", "rug", "mat", "lamp", "bulb",
    "fan", "broom", "mop", "bucket", "trash", "bin", "can", "waste",
    "nature", "wild", "animal", "insect", "bug", "bee", "ant", "snake",
    "frog", "lion", "tiger", "bear", "zebra", "goat", "sheep", "cow",
    "bull", "horse", "rabbit", "rat", "mouse", "pig", "bat", "owl",
    "eagle", "hawk", "crow", "duck", "goose", "swan", "crane", "whale",
    "shark", "seal", "crab", "fish", "bird", "dog", "cat", "tree",
    "flower", "grass", "leaf", "fruit", "berry", "grain", "bread", "milk",
    "juice", "food", "meal", "break", "lunch", "dinner", "taste", "smell",
    "touch", "sound", "voice", "laugh", "smile", "cry", "shout", "sing",
    "jump", "run", "walk", "swim", "climb", "fall", "rise", "stand",
    "sit", "sleep", "wake", "dream", "hope", "fear", "love", "hate",
    "like", "know", "feel", "see", "hear", "find", "lose", "keep",
    "give", "take", "send", "bring", "carry", "push", "pull", "throw",
    "catch", "drop", "fix", "make", "do", "work", "play", "game",
    "fun", "time", "day", "year", "hour", "minute", "second",
)

# -------- Full sentences (sentence category, up to 200 chars) --------
SENTENCES: Tuple[str, ...] = (
    "The quick brown fox jumps over the lazy dog.",
    "I like to read books in the quiet room.",
    "The sun shines bright in the blue sky.",
    "She walks to the store every day.",
    "We play games and have fun together.",
    "The cat sits on the soft chair.",
    "He writes words on clean paper.",
    "They swim in the cool water.",
    "Birds fly high in the clear sky.",
    "The dog runs fast in the green field.",
    "I drink fresh milk every morning.",
    "She sings songs with a sweet voice.",
    "We eat good food at the table.",
    "The tree grows tall in the forest.",
    "He finds peace in the quiet place.",
    "They learn new things every day.",
    "The boat sails on the blue ocean.",
    "I sleep well in my warm bed.",
    "She makes bread in the kitchen.",
    "We watch birds fly in the sky.",
    "The cat sits near the window.",
    "He reads books in the library.",
    "They walk along the quiet street.",
    "The sun rises early in the morning.",
    "I write words with a black pen.",
    "She plays music on the old piano.",
    "We see stars shine in the dark night.",
    "The dog barks loud in the yard.",
    "He finds joy in simple things.",
    "They share food with happy friends.",
)
