"""Player totals, batting rates and observed run expectancy."""