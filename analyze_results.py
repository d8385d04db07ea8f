import sys

import pandas as pd

path = sys.argv[1] if len(sys.argv) > 1 else "mandragora_simulations.csv"
df = pd.read_csv(path)

# Overall win rates
win_rates = df.groupby(['Player_Strategy', 'Opponent_Strategy'])['Winner'].value_counts(normalize=True)
print(win_rates)

# Win rates per starting pattern
print(df.groupby(['Pattern', 'Player_Strategy'])['Winner'].value_counts(normalize=True).unstack().fillna(0))

# Average game length by strategy pair
avg_moves = df.groupby(['Player_Strategy', 'Opponent_Strategy'])[['Moves', 'Time_Seconds']].mean()
print(avg_moves)

# Score differences
df['Score_Diff'] = df['Player_Score'] - df['Opponent_Score']
score_stats = df.groupby(['Player_Strategy', 'Opponent_Strategy'])['Score_Diff'].describe()
print(score_stats)
