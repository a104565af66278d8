from django.urls import path
from .views import (
    health,
    genedle_session_word,
    genedle_letters,
    genedle_guess,
    spelling_gene_letters,
    spelling_gene_guess,
)

urlpatterns = [
    path('health/', health, name='Health'),
    path('games/genedle', genedle_session_word, name='genedle-session-word'),
    path('api/v1/genedle-letters/<int:key>', genedle_letters, name='genedle-letters'),
    path('api/v1/genedle-guess', genedle_guess, name='genedle-guess'),
    path(
        'api/v1/spelling-gene/<int:seed>/<int:min_length>/<int:min_words>/<int:num_letters>',
        spelling_gene_letters,
        name='spelling-gene-letters',
    ),
    path(
        'api/v1/spelling-gene-guess/<int:seed>/<int:min_length>/<int:min_words>/<int:num_letters>/<str:guess>',
        spelling_gene_guess,
        name='spelling-gene-guess',
    ),
]
