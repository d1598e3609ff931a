import numpy as np
import pytest

from calibrate import (
    caesar_encrypt,
    columnar_encrypt,
    random_letters,
    route_spiral_encrypt,
    vigenere_encrypt,
)
from cipherstat import only_letters

PLAINTEXT = (
    "THE QUICK BROWN FOX JUMPS OVER THE LAZY DOG AND RUNS AWAY INTO THE "
    "FOREST WHERE THE ANIMALS LIVE IN PEACE AND HARMONY WITH NATURE"
)

MILITARY = (
    "THE ENEMY IS ADVANCING FROM THE NORTH WE NEED REINFORCEMENTS IMMEDIATELY "
    "SEND THE MESSAGE TO THE GENERAL BEFORE DAWN AND HOLD THE BRIDGE UNTIL THE "
    "ARMY ARRIVES THE ENEMY WILL ATTACK AT MIDNIGHT"
)

LANGUAGE_SAMPLES = {
    "english": "US President Donald Trump has given Ukraine less than a week to accept his plan, "
               "widely seen as favoring Russia, to end the war, as President Volodymyr Zelensky "
               "said his country faced one of the most difficult moments in its history.",
    "spanish": "El ingenioso hidalgo don Quijote de la Mancha es una novela escrita por el español "
               "Miguel de Cervantes Saavedra. Publicada su primera parte con el título de El "
               "ingenioso hidalgo don Quijote de la Mancha a comienzos de 1605, es la obra más "
               "destacada de la literatura española.",
    "german": "Die Verwandlung ist eine Erzählung von Franz Kafka, die 1912 entstand und 1915 "
              "veröffentlicht wurde. Die Geschichte handelt von Gregor Samsa, der eines Morgens "
              "als riesiges Ungeziefer verwandelt aufwacht.",
    "french": "Longtemps, je me suis couché de bonne heure. Parfois, à peine ma bougie éteinte, "
              "mes yeux se fermaient si vite que je n'avais pas le temps de me dire : « Je "
              "m'endors. »",
    "italian": "Nel mezzo del cammin di nostra vita mi ritrovai per una selva oscura, ché la "
               "diritta via era smarrita. Ahi quanto a dir qual era è cosa dura esta selva "
               "selvaggia e aspra e forte che nel pensier rinova la paura!",
    "portuguese": "As armas e os barões assinalados, Que da ocidental praia Lusitana, Por mares "
                  "nunca de antes navegados, Passaram ainda além da Taprobana, Em perigos e "
                  "guerras esforçados, Mais do que prometia a força humana.",
    "russian": "Все счастливые семьи похожи друг на друга, каждая несчастливая семья "
               "несчастлива по-своему. Все смешалось в доме Облонских.",
    "chinese": "道可道，非常道。名可名，非常名。无名天地之始；有名万物之母。故常无，欲以观其妙；常有，欲以观其徼。",
}


@pytest.fixture
def plaintext():
    return only_letters(PLAINTEXT)


@pytest.fixture
def military():
    return only_letters(MILITARY)


@pytest.fixture
def caesar7(plaintext):
    return caesar_encrypt(plaintext, 7)


@pytest.fixture
def vigenere_key3(military):
    return vigenere_encrypt(military, "KEY")


@pytest.fixture
def route_cipher(military):
    return route_spiral_encrypt(military, 11, 15)


@pytest.fixture
def columnar_cipher(military):
    return columnar_encrypt(military, [3, 0, 5, 2, 6, 1, 4])


@pytest.fixture
def noise():
    return random_letters(120, np.random.default_rng(7))
